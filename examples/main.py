"""Load example.yml and print a couple of nested values."""

import sys

from loguru import logger

from dots.document import DEFAULT_CONFIG_PATH, load
from dots.errors import LoadError, ResolutionError


def main(path: str = str(DEFAULT_CONFIG_PATH)) -> int:
    try:
        config = load(path)
    except LoadError as exc:
        logger.critical(f"No usable configuration: {exc}")
        return 1

    try:
        s = config.get_string("a.b.c")
        i = config.get_int("a.b.d")
    except ResolutionError as exc:
        logger.error(exc)
        return 1

    print(s)
    print(i)
    return 0


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level="INFO")
    sys.exit(main(*sys.argv[1:2]))
