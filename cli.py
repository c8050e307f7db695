from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from src.resolver.base import UserInputRequest, WhitelistRequest
from src.resolver.errors import ResolutionError
from src.resolver.key_resolver import resolve_user_input
from src.resolver.libphone_parser import LibPhoneParser
from src.resolver.whitelist_resolver import resolve_whitelist
from src.utils.config_loader import load_service_settings
from src.utils.logger import setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve phone numbers without running the HTTP service")
    parser.add_argument("--config", default=None, help="Service config YAML path")
    subparsers = parser.add_subparsers(dest="command", required=True)

    user_input = subparsers.add_parser("user-input", help="Classify a number by country")
    user_input.add_argument("--input", required=True, help="Phone number to classify")
    user_input.add_argument("--validkeys", default=None, help="Comma-separated allowed country codes")
    user_input.add_argument("--notallowedkeys", default=None, help="Comma-separated blocked country codes")
    user_input.add_argument("--defaultkey", default=None, help="Key returned when nothing matches")

    whitelist = subparsers.add_parser("whitelist", help="Check a number against a whitelist")
    whitelist.add_argument("--input", required=True, help="Phone number to check")
    whitelist.add_argument("--allowednumbers", required=True, help="Comma-separated allowed numbers")
    whitelist.add_argument("--defaultkey", default=None, help="Key returned when the number is not listed")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    # Keep stdout for the JSON result
    setup_logger(log_level="ERROR")
    settings = load_service_settings(args.config)

    try:
        if args.command == "user-input":
            resolution = resolve_user_input(
                UserInputRequest(
                    input=args.input,
                    validkeys=args.validkeys,
                    notallowedkeys=args.notallowedkeys,
                    defaultkey=args.defaultkey,
                ),
                LibPhoneParser(),
                settings,
            )
        else:
            resolution = resolve_whitelist(
                WhitelistRequest(
                    input=args.input,
                    allowednumbers=args.allowednumbers,
                    defaultkey=args.defaultkey,
                ),
                settings,
            )
    except ResolutionError as e:
        body: Dict[str, Any] = {"code": "400", "result": [{"type": "text", "message": e.message}]}
        print(json.dumps(body, ensure_ascii=False))
        return 1

    print(json.dumps({"code": "200", "result": [{"message": resolution.message}]}, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
