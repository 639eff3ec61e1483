import argparse
import sys

import prioheap
import prioheap.exec.sort
import prioheap.exec.topk


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="prioheap: comparator-ordered heaps and Top-K selection.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Print prioheap's version and exit.",
    )
    subparsers = parser.add_subparsers(title="Commands")
    prioheap.exec.topk.register_command(subparsers)
    prioheap.exec.sort.register_command(subparsers)
    args = parser.parse_args(argv)

    if args.version:
        print("prioheap", prioheap.__version__)
        return

    if "func" not in args:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
