import sys
import logging
from tabulate import tabulate

from prioheap.config import RankOrder, SelectorConfig
from prioheap.errors import ConfigError, IncomparableError, InvalidCapacityError
from prioheap.exec.input import load_column
from prioheap.selector import BoundedSelector
from prioheap.utils import log_verbose, set_up_logging

logger = logging.getLogger(__name__)


def register_command(subparsers) -> None:
    parser = subparsers.add_parser(
        "topk",
        help="Print the K best values of a CSV column.",
    )
    parser.add_argument("csv", type=str, help="Path to the CSV file to read.")
    parser.add_argument(
        "--column",
        type=str,
        help="The column to rank. Overrides the config file.",
    )
    parser.add_argument(
        "-k",
        type=int,
        help="The number of values to keep. Overrides the config file.",
    )
    parser.add_argument(
        "--order",
        type=str,
        choices=[order.value for order in RankOrder],
        help="Keep the largest or the smallest values. Defaults to largest.",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML file holding the selector settings.",
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

    try:
        if args.config is not None:
            config = SelectorConfig.load_from_file(args.config)
        else:
            config = SelectorConfig(None)

        k = args.k if args.k is not None else config.k()
        order = (
            RankOrder.from_str(args.order) if args.order is not None else config.order()
        )
        column = args.column if args.column is not None else config.column()
        if column is None:
            raise ConfigError("Please specify a column to rank.")

        values = load_column(args.csv, column)
        selector = BoundedSelector(k, order.comparator())
        num_kept = selector.offer_all(values)
    except (ConfigError, InvalidCapacityError, IncomparableError) as ex:
        logger.error("%s", ex)
        sys.exit(1)

    log_verbose(
        logger,
        "Offered %d value(s); %d were kept at the time they arrived.",
        len(values),
        num_kept,
    )
    logger.debug("Selected the %s %d of %d value(s)", order.value, k, len(values))

    best = selector.drain()
    rows = [(rank, value) for rank, value in enumerate(best, start=1)]
    print(tabulate(rows, headers=["rank", column], tablefmt="simple_grid"))
