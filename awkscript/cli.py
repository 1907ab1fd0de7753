#!/usr/bin/env python3
"""
awklex - print the tokens of an AWKScript file
==============================================

Usage:
    awklex [path] [options]

Options:
    --json          Output tokens as a JSON array
    --log-level     Logging verbosity (default WARNING)

Without a path the script reads test.txt from the current directory.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .lexer import LexerError, Token, tokenize_file

DEFAULT_PATH = "test.txt"
LOG_FORMAT = '%(levelname)s:%(name)s:%(message)s'

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_LEX_ERROR = 2

log = logging.getLogger(__name__)


def token_to_dict(token: Token) -> dict:
    return {
        "type": token.type.name,
        "text": token.text,
        "line": token.line,
        "column": token.column,
    }


def format_tokens(tokens: List[Token], as_json: bool = False) -> str:
    """Render tokens one per line, or as a JSON array."""
    if as_json:
        return json.dumps([token_to_dict(token) for token in tokens], indent=2)
    return "\n".join(str(token) for token in tokens)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="awklex",
        description="Tokenize an AWKScript source file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    awklex                      # Tokenize ./test.txt
    awklex script.awk           # Tokenize script.awk
    awklex script.awk --json    # JSON output
        """
    )

    parser.add_argument('path', nargs='?', default=DEFAULT_PATH,
                        help=f'Source file to tokenize (default: {DEFAULT_PATH})')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the awklex command"""

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        tokens = tokenize_file(args.path)
    except OSError as e:
        print(f"Error reading the file: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    except LexerError as e:
        print(str(e), file=sys.stderr, end="")
        return EXIT_LEX_ERROR

    log.info("Read %d tokens from %s", len(tokens), args.path)
    output = format_tokens(tokens, as_json=args.json)
    if output:
        print(output)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
