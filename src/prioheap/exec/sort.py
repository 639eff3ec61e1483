import sys
import logging
from tabulate import tabulate

from prioheap.errors import ConfigError, IncomparableError
from prioheap.exec.input import load_column
from prioheap.ordering import natural_order, reverse_order
from prioheap.patterns import heap_sort
from prioheap.utils import set_up_logging

logger = logging.getLogger(__name__)


def register_command(subparsers) -> None:
    parser = subparsers.add_parser(
        "sort",
        help="Heap-sort a CSV column and print it.",
    )
    parser.add_argument("csv", type=str, help="Path to the CSV file to read.")
    parser.add_argument(
        "--column", type=str, required=True, help="The column to sort."
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Print the largest values first.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Set to enable debug logging.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write log messages to this file instead of the console.",
    )
    parser.set_defaults(func=main)


def main(args) -> None:
    set_up_logging(filename=args.log_file, debug_mode=args.debug)
    cmp = reverse_order(natural_order) if args.descending else natural_order

    try:
        values = load_column(args.csv, args.column)
        ordered = heap_sort(values, cmp)
    except (ConfigError, IncomparableError) as ex:
        logger.error("%s", ex)
        sys.exit(1)

    logger.debug("Sorted %d value(s)", len(ordered))
    print(tabulate([(value,) for value in ordered], headers=[args.column]))
