import enum
import logging
import pathlib
import yaml
from typing import Any, Dict, Optional

from prioheap.errors import ConfigError, InvalidCapacityError
from prioheap.ordering import Comparator, natural_order, reverse_order
from prioheap.selector import check_capacity

logger = logging.getLogger(__name__)


def _parse_yaml(stream: Any) -> Any:
    # Config files come from users, so only plain YAML types are built.
    try:
        return yaml.safe_load(stream)
    except yaml.YAMLError as ex:
        raise ConfigError("Invalid selector config: {}".format(ex)) from ex


class RankOrder(str, enum.Enum):
    Largest = "largest"
    Smallest = "smallest"

    @staticmethod
    def from_str(candidate: str) -> "RankOrder":
        if candidate == RankOrder.Largest.value:
            return RankOrder.Largest
        elif candidate == RankOrder.Smallest.value:
            return RankOrder.Smallest
        else:
            raise ConfigError("Unrecognized rank order {}".format(candidate))

    def comparator(self) -> Comparator[Any]:
        """
        The "desired" comparator: values that should be kept come first.
        """
        if self is RankOrder.Largest:
            return reverse_order(natural_order)
        else:
            return natural_order


class SelectorConfig:
    """
    Settings for a Top-K selection run, typically loaded from a YAML file:

      k: 10
      order: largest
      column: latency_s
    """

    @classmethod
    def load_from_file(cls, file_path: str | pathlib.Path) -> "SelectorConfig":
        try:
            with open(file_path, "r", encoding="UTF-8") as file:
                raw = _parse_yaml(file)
        except OSError as ex:
            raise ConfigError(
                "Could not read config file {}: {}".format(file_path, ex)
            ) from ex
        logger.debug("Loaded selector config from %s", file_path)
        return cls(raw)

    @classmethod
    def load_from_yaml_str(cls, yaml_str: str) -> "SelectorConfig":
        return cls(_parse_yaml(yaml_str))

    def __init__(self, raw: Optional[Dict[str, Any]]) -> None:
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError("The selector config must be a YAML mapping.")
        self._raw = raw

    def has_k(self) -> bool:
        return "k" in self._raw

    def k(self) -> int:
        if "k" not in self._raw:
            raise ConfigError("Missing required config value `k`.")
        try:
            return check_capacity(self._raw["k"])
        except InvalidCapacityError as ex:
            raise ConfigError(str(ex)) from ex

    def order(self) -> RankOrder:
        if "order" not in self._raw:
            return RankOrder.Largest
        return RankOrder.from_str(str(self._raw["order"]))

    def column(self) -> Optional[str]:
        if "column" not in self._raw:
            return None
        return str(self._raw["column"])

