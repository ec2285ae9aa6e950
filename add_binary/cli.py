"""Command line entry point."""

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from add_binary.converter import Strategy, convert_all, to_binary
from add_binary.core.config import get_config
from add_binary.core.exceptions import ConversionError
from add_binary.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="add-binary", description="Sum two integers and print the result in binary"
    )
    parser.add_argument("a", type=int, help="First operand")
    parser.add_argument("b", type=int, help="Second operand")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--strategy", choices=[s.value for s in Strategy],
                       help="Conversion strategy (default from ADD_BINARY_DEFAULT_STRATEGY)")
    group.add_argument("--all", action="store_true", help="Run every strategy")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = get_config()
    except ValidationError as e:
        print(f"error: invalid configuration\n{e}", file=sys.stderr)
        return 2
    setup_logging(config.log_level, config.log_json)

    try:
        if args.all:
            results = convert_all(args.a, args.b, config)
        else:
            strategy = args.strategy or config.default_strategy
            results = {strategy: to_binary(args.a, args.b, strategy, config)}
    except ConversionError as e:
        logger.debug("Conversion failed", code=e.code)
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps({"a": args.a, "b": args.b, "results": results}))
    elif args.all:
        for name, binary in results.items():
            print(f"{name}: {binary}")
    else:
        print(next(iter(results.values())))
    return 0


if __name__ == "__main__":
    sys.exit(main())
