import logging
import pathlib
import numpy as np
import numpy.typing as npt
import pandas as pd

from prioheap.errors import ConfigError

logger = logging.getLogger(__name__)


def load_column(csv_path: str | pathlib.Path, column: str) -> npt.NDArray:
    """
    Reads one column of a CSV file. Missing values are dropped since they have
    no defined ordering.
    """
    try:
        frame = pd.read_csv(csv_path)
    except FileNotFoundError as ex:
        raise ConfigError("CSV file {} does not exist.".format(csv_path)) from ex
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as ex:
        raise ConfigError("Could not parse {}: {}".format(csv_path, ex)) from ex
    if column not in frame.columns:
        raise ConfigError(
            "Column `{}` not found in {} (available: {}).".format(
                column, csv_path, ", ".join(map(str, frame.columns))
            )
        )
    series = frame[column]
    num_missing = int(series.isna().sum())
    if num_missing > 0:
        logger.info("Skipping %d missing value(s) in `%s`.", num_missing, column)
    values = series.dropna().to_numpy()
    if not np.issubdtype(values.dtype, np.number):
        # Mixed or textual columns are compared as strings.
        values = values.astype(str)
    logger.debug("Loaded %d value(s) of dtype %s", len(values), values.dtype)
    return values
