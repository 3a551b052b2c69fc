"""pytinder data models."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class RequestDescriptor:
    """Fully formed outbound call, independent of the transport."""

    url: str
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    json_body: Any = None
