#!/usr/bin/env python3
"""
Print a JWT for calling the receipt processor API.

The token is signed with RECEIPT_JWT_SECRET (environment or .env).

Usage: python generate_token.py [--subject NAME] [--ttl SECONDS]
"""

import argparse
import sys

from auth import generateToken
from config import getSettings

DEFAULT_SUBJECT = "receipt-client"


def main(argv=None) -> int:
    settings = getSettings()
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--subject", default=DEFAULT_SUBJECT)
    parser.add_argument("--ttl", type=int, default=settings.TOKEN_TTL_SECONDS, help="Lifetime in seconds")
    args = parser.parse_args(argv)

    if not settings.JWT_SECRET:
        print("Error: RECEIPT_JWT_SECRET required", file=sys.stderr)
        return 1

    token = generateToken(args.subject, settings.JWT_SECRET, args.ttl)
    print(f"Generated JWT Token: {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
