"""Command-line interface for routegroup."""

import logging
import os
import sys

from .parser import create_parser

logger = logging.getLogger("routegroup")


def _configure_logging(debug: bool) -> None:
    if logger.hasHandlers():
        return

    handler = logging.StreamHandler(sys.stderr)
    if debug:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
        )
        logger.setLevel(logging.DEBUG)
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")
        logger.setLevel(logging.INFO)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args_ns = parser.parse_args(argv)

    _configure_logging(args_ns.debug or bool(os.getenv("ROUTEGROUP_DEBUG")))

    if not hasattr(args_ns, "func"):
        parser.print_help()
        return 0

    return args_ns.func(args_ns)


if __name__ == "__main__":
    sys.exit(main())
