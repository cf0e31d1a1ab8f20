import argparse
import logging
import sys
from pathlib import Path

from egg.config import get_log_level, get_recursion_limit
from egg.errors import EggError
from egg.interpreter import Interpreter
from egg.printer import to_string

logger = logging.getLogger("egg")


def main_with_args(files: list[Path], source: str | None = None, print_result: bool = False) -> int:
    logging.basicConfig(
        level=get_log_level(),
        format='%(message)s',
        stream=sys.stderr
    )

    try:
        limit = get_recursion_limit()
    except ValueError as e:
        logger.error("%s", e)
        return 1
    if limit is not None:
        sys.setrecursionlimit(limit)

    if source is not None:
        fragments = [source]
    elif files:
        try:
            fragments = [path.read_text() for path in files]
        except OSError as e:
            logger.error("Cannot read %s: %s", e.filename, e.strerror)
            return 1
    else:
        fragments = [sys.stdin.read()]

    try:
        result = Interpreter().run(*fragments)
    except EggError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    if print_result:
        print(to_string(result))
    return 0


def main():
    parser = argparse.ArgumentParser(
        prog="egg",
        description="Run an Egg program"
    )
    parser.add_argument(
        "files",
        type=Path,
        nargs="*",
        help="Source files, joined with newlines into one program (default: stdin)",
    )
    parser.add_argument(
        "-e",
        dest="source",
        help="Program text to run instead of files",
    )
    parser.add_argument(
        "--print-result",
        action="store_true",
        help="Print the value of the program after it finishes",
    )
    args = parser.parse_args()
    sys.exit(main_with_args(**vars(args)))


if __name__ == "__main__":
    main()
