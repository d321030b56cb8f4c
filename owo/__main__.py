import logging
import sys

from owo import config
from owo.repl import Repl


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)
    Repl().run()


if __name__ == "__main__":
    main()
