import logging

VERBOSE = 5

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M"
PACKAGE_LOGGER = "prioheap"


def log_verbose(logger: logging.Logger, message: str, *args) -> None:
    logger.log(VERBOSE, message, *args)


def set_up_logging(filename=None, debug_mode=False, also_console=False):
    level = logging.DEBUG if debug_mode else logging.INFO
    logging.addLevelName(VERBOSE, "VERBOSE")

    if filename is None or also_console:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, level=level)

    if filename is None:
        # Undo a log file set up by an earlier call in the same process.
        _remove_handlers(logging.getLogger(PACKAGE_LOGGER))
        logging.getLogger(PACKAGE_LOGGER).propagate = True
        return

    package_logger = create_custom_logger(PACKAGE_LOGGER, filename, level)
    # Console output, if requested, goes through the root logger's handlers.
    package_logger.propagate = also_console


def create_custom_logger(
    name: str, log_file: str, level: int = logging.DEBUG
) -> logging.Logger:
    handler = logging.FileHandler(log_file)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    # We do not want the messages to propagate up to the root logger.
    logger.propagate = False
    _remove_handlers(logger)

    logger.addHandler(handler)
    return logger


def _remove_handlers(logger: logging.Logger) -> None:
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
