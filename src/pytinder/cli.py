"""pytinder CLI tool."""

import argparse
import json
import logging
import sys

from pytinder import TinderClient, errors
from pytinder.config import Settings


def _print_json(data):
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def main(argv=None):
    """Main CLI entry point."""
    settings = Settings()

    parser = argparse.ArgumentParser(description="Tinder API command line client")
    parser.add_argument(
        "--facebook-token",
        default=settings.facebook_token,
        help="Facebook OAuth token (env: TINDER_FACEBOOK_TOKEN)",
    )
    parser.add_argument(
        "--facebook-id",
        default=settings.facebook_id,
        help="Facebook user id (env: TINDER_FACEBOOK_ID)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.timeout,
        help="Request timeout in seconds (default: 30)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("auth", help="Authorize and print the session defaults")

    recs_parser = subparsers.add_parser("recs", help="List nearby profiles")
    recs_parser.add_argument("--limit", type=int, default=10, help="Maximum profiles (default: 10)")

    ping_parser = subparsers.add_parser("ping", help="Update your position")
    ping_parser.add_argument("lon", type=float, help="Longitude")
    ping_parser.add_argument("lat", type=float, help="Latitude")

    message_parser = subparsers.add_parser("message", help="Send a message to a match")
    message_parser.add_argument("user_id", help="User ID")
    message_parser.add_argument("text", help="Message text")

    like_parser = subparsers.add_parser("like", help="Swipe right on a user")
    like_parser.add_argument("user_id", help="User ID")

    pass_parser = subparsers.add_parser("pass", help="Swipe left on a user")
    pass_parser.add_argument("user_id", help="User ID")

    subparsers.add_parser("updates", help="Fetch updates since the session started")
    subparsers.add_parser("history", help="Fetch the full history")

    user_parser = subparsers.add_parser("user", help="Show a user profile")
    user_parser.add_argument("user_id", help="User ID")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.facebook_token or not args.facebook_id:
        parser.error("--facebook-token and --facebook-id are required")

    client = TinderClient(timeout=args.timeout)

    try:
        defaults = client.authorize(args.facebook_token, args.facebook_id)

        if args.command == "auth":
            print(f"✓ Authorized as {client.user_id}")
            _print_json(defaults)

        elif args.command == "recs":
            _print_json(client.get_recommendations(args.limit))

        elif args.command == "ping":
            _print_json(client.update_position(args.lon, args.lat))

        elif args.command == "message":
            _print_json(client.send_message(args.user_id, args.text))

        elif args.command == "like":
            _print_json(client.like_user(args.user_id))

        elif args.command == "pass":
            _print_json(client.pass_user(args.user_id))

        elif args.command == "updates":
            _print_json(client.get_updates())

        elif args.command == "history":
            _print_json(client.get_history())

        elif args.command == "user":
            _print_json(client.get_user(args.user_id))

    except errors.TinderError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
