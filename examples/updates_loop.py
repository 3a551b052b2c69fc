#!/usr/bin/env python3
"""Poll for new matches and messages every minute."""

import asyncio
import os

from pytinder import AsyncTinderClient, errors


async def main():
    async with AsyncTinderClient() as client:
        await client.authorize(
            os.environ["TINDER_FACEBOOK_TOKEN"],
            os.environ["TINDER_FACEBOOK_ID"],
        )
        print(f"Authorized as {client.user_id}")

        while True:
            try:
                updates = await client.get_updates()
            except errors.TransportError as e:
                print(f"Update failed, cursor kept: {e}")
            else:
                for match in updates.get("matches", []):
                    for message in match.get("messages", []):
                        print(f"{match.get('_id')}: {message.get('message')}")
            await asyncio.sleep(60)


if __name__ == "__main__":
    asyncio.run(main())
