"""maestro-testdata CLI — prints resolved test data for one platform.

Usage:
    maestro-testdata [--platform ios] [--mode full] [--format js] [-o FILE]

Output is JSON by default (machine-readable for CI).
Use --pretty for indented, human-readable output, or --format js to
write a file Maestro can load with runScript.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import TestDataError
from .logging_config import configure_logging
from .platforms import SUPPORTED_PLATFORMS, get_platform
from .resolver import build_testdata
from .serializers import render_script, to_output

logger = logging.getLogger("maestro_testdata.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maestro-testdata",
        description="Print platform test data for Maestro flows",
    )
    parser.add_argument(
        "--platform",
        choices=SUPPORTED_PLATFORMS,
        default=None,
        help="Target platform (default: $MAESTRO_TESTDATA_PLATFORM or android)",
    )
    parser.add_argument(
        "--mode",
        default=None,
        help="App mode override (default: $APP_MODE or lite)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on app modes that are not in the platform's catalog",
    )
    parser.add_argument(
        "--format",
        choices=("json", "js"),
        default="json",
        help="Output format",
    )
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    parser.add_argument("-o", "--output", default=None, help="Write to a file instead of stdout")
    parser.add_argument("--log-level", default="WARNING", help="Log level")
    parser.add_argument("--log-json", action="store_true", help="JSON-formatted logs")
    return parser


def main(argv: list[str] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_json)

    platform = args.platform or get_platform()
    try:
        data = build_testdata(platform=platform, strict=args.strict, mode=args.mode)
    except (TestDataError, ValueError) as e:
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1

    if args.format == "js":
        text = render_script(data, platform)
    else:
        indent = 2 if args.pretty else None
        text = json.dumps(to_output(data), indent=indent)

    if args.output:
        path = Path(args.output)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n")
        except OSError as e:
            print(json.dumps({"error": f"Cannot write {path}: {e}"}), file=sys.stderr)
            return 1
        logger.info("Wrote %s test data to %s", args.format, path)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
