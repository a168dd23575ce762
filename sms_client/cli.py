"""Command-line program that sends a single SMS or MMS.

Example:
    TWILIO_ACCOUNT_SID=AC... TWILIO_AUTH_TOKEN=... \\
        python -m sms_client -t +15551230000 -f +15557650000 -m "Hello" -v
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from sms_client.adapters.twilio import MessagingClient
from sms_client.logging_config import configure_logging
from sms_client.services.transport import init_transport, shutdown_transport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sms-send",
        description="Send an SMS (or MMS with --picture-url) through the Twilio Messages API.",
    )
    parser.add_argument("-a", "--account-sid", default=os.getenv("TWILIO_ACCOUNT_SID"),
                        help="Account SID (default: $TWILIO_ACCOUNT_SID)")
    parser.add_argument("-s", "--auth-token", default=os.getenv("TWILIO_AUTH_TOKEN"),
                        help="Auth token (default: $TWILIO_AUTH_TOKEN)")
    parser.add_argument("-t", "--to", required=True, help="Destination number")
    parser.add_argument("-f", "--from", dest="from_number", default=os.getenv("TWILIO_FROM_NUMBER"),
                        help="Sender number in the account (default: $TWILIO_FROM_NUMBER)")
    parser.add_argument("-m", "--message", required=True, help="Message body")
    parser.add_argument("-p", "--picture-url", default=None,
                        help="Media URL; turns the message into an MMS")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print Twilio's response body")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    missing = [
        flag
        for flag, value in (
            ("--account-sid", args.account_sid),
            ("--auth-token", args.auth_token),
            ("--from", args.from_number),
        )
        if not value
    ]
    if missing:
        parser.error(f"missing required value(s): {', '.join(missing)}")

    configure_logging("DEBUG" if args.verbose else None)

    init_transport()
    try:
        client = MessagingClient(args.account_sid, args.auth_token)
        result = client.send_message(
            args.to,
            args.from_number,
            args.message,
            media_url=args.picture_url,
            verbose=args.verbose,
        )
    finally:
        shutdown_transport()

    if result.ok:
        print("Message sent.")
        if result.detail:
            print(result.detail)
        return 0

    print("Message failed.", file=sys.stderr)
    if result.detail:
        print(result.detail, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
