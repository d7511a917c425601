# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
The command line interface prints the parsed structure of an XML document as JSON:

.. code-block:: console

    $ python -m sprig '<p>text <hr /> more text</p>'
"""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import version
from pathlib import Path
from typing import Any, Optional

from _sprig.exceptions import FailedDocumentLoading, ParsingError
from _sprig.parser import ParserOptions
from _sprig.serializer import to_json
from sprig import load


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprig",
        description="Parses an XML document and prints its structure as JSON.",
    )
    parser.add_argument("--version", action="version", version=version("sprig"))

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "source",
        nargs="?",
        help="The XML text to parse. It's read from the standard input if omitted.",
    )
    source.add_argument("--file", type=Path, help="Parse the contents of this file.")
    source.add_argument(
        "--url", help="Parse the document from this http(s) URL (requires httpx)."
    )

    parser.add_argument(
        "--encoding",
        help="The encoding of files or downloads whose encoding isn't declared.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an attribute name occurs more than once in a tag.",
    )
    parser.add_argument(
        "--ordered-attributes",
        action="store_true",
        help="Render attributes as a list in document order instead of an object.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="The indentation width of the JSON output (default: %(default)s).",
    )
    return parser


def _get_source(args: argparse.Namespace) -> Any:
    if args.file is not None:
        return args.file
    if args.url is not None:
        return args.url
    if args.source is not None:
        return args.source
    return sys.stdin.read()


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = create_argument_parser().parse_args(argv)
    parser_options = ParserOptions(
        encoding=args.encoding, reject_duplicate_attributes=args.strict
    )

    try:
        document = load(_get_source(args), parser_options)
    except (FailedDocumentLoading, ParsingError) as e:
        print(e, file=sys.stderr)
        return 1

    print(
        to_json(
            document, indent=args.indent, ordered_attributes=args.ordered_attributes
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
