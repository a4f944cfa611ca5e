#!/usr/bin/env python
"""
Script to run the API key extractor over headers given on the command line.

Usage:
  python scripts/extract_key.py --header "Authorization: ApiKey abc123"
  python scripts/extract_key.py -H "authorization: ApiKey first" -H "Authorization: ApiKey second"
  python scripts/extract_key.py --header-name X-Api-Auth -H "X-Api-Auth: ApiKey abc123"
"""

import argparse
import sys

from apikey_auth.auth import APIKeyHandler


def parse_header(raw: str) -> tuple:
    """
    Split a "Name: value" argument into (name, value).

    Leading whitespace before the value is removed, as HTTP does; trailing
    spaces in the value survive.
    """
    if ':' not in raw:
        raise argparse.ArgumentTypeError(f"Header must look like 'Name: value', got {raw!r}")
    name, value = raw.split(':', 1)
    value = value.lstrip(' \t')
    return name.strip(), value


def main():
    """Main function to extract an API key from command-line headers."""
    parser = argparse.ArgumentParser(description='Extract an API key from an ApiKey Authorization header')
    parser.add_argument('-H', '--header', dest='headers', action='append', type=parse_header,
                        default=[], help='Header in "Name: value" form (repeatable)')
    parser.add_argument('--header-name', default='Authorization',
                        help='Header to read the key from (default: Authorization)')
    parser.add_argument('--reject-empty', action='store_true',
                        help='Treat "ApiKey " with no token as malformed')
    args = parser.parse_args()

    headers = {}
    for name, value in args.headers:
        headers.setdefault(name, []).append(value)

    handler = APIKeyHandler(header_name=args.header_name, reject_empty=args.reject_empty)
    api_key, error = handler.extract(headers)

    if error is not None:
        print(f"Error ({error.kind.value}): {error}")
        sys.exit(1)

    print(f"API key: {api_key!r}")


if __name__ == "__main__":
    main()
