"""Entry point for corkboard CLI."""

import logging
import sys


def main():
    from corkboard.cli import build_parser

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
