"""Command-line entry point: dump heading trees or print queried sections."""

import argparse
import logging
import sys
from typing import Optional

from .tools.get_outline import dump_tree
from .tools.query_files import query_files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mdsect", description="Heading-addressed markdown sections")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    tree = commands.add_parser("tree", help="Print the heading tree of each file")
    tree.add_argument("files", nargs="+")

    query = commands.add_parser("query", help="Print the section at a heading path from each file")
    query.add_argument(
        "-s", "--step",
        dest="patterns",
        action="append",
        default=[],
        help="Title pattern for the next heading level (repeatable; '*' matches anything)",
    )
    query.add_argument("files", nargs="+")

    commands.add_parser("serve", help="Run the MCP server on stdio")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        from .server import main as serve
        serve()
        return 0

    if args.command == "tree":
        status = 0
        for file_path in args.files:
            result = dump_tree(file_path)
            if "error" in result:
                print(result["error"], file=sys.stderr)
                status = 1
                continue
            print(file_path)
            print(result["tree"])
        return status

    result = query_files(args.files, args.patterns)
    for error in result["errors"] or []:
        print(f"{error['file']}: {error['error']}", file=sys.stderr)
    if result["result"]:
        print(result["result"])
    return 1 if result["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
