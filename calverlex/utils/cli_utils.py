"""CLI utils"""

# pylint: disable=logging-fstring-interpolation

import logging

from typing import Any, Mapping, Sequence, Union, Optional
from functools import reduce

logger = logging.getLogger(__name__)


def query_dict(dictionary: Mapping[Any, Any], keys: Sequence[Any]) -> Union[Any, None]:
    """Access a nested value in a dictionary corresponding
    to a series of keys.

    Args:
        dictionary: A dictionary containing anything.
        keys: A sequence of values corresponding to keys
            in `dictionary`

    Returns:
        The nested value corresponding to the given series
        of keys, or `None` is such a value doesn't exist.
    """

    def extract(dictionary: Any, key: Any) -> Union[Any, None]:
        """Get value associated with key, defaulting to None."""
        if dictionary is None or not isinstance(dictionary, dict):
            return None
        return dictionary.get(key)

    return reduce(extract, keys, dictionary)  # type: ignore


def log_value_from_config(arg_name: str, config_value: Any) -> None:
    """Logs when getting a value from the config

    Args:
        arg_name (str): Name of the argument. Used for logging.
        config_value (Any): The value in the config
    """
    logger.debug(
        f"The {arg_name} argument is being taken from configuration, i.e., {config_value}."
    )


def strip_or_none(
    ctx: Any,  # pylint: disable=unused-argument
    param: Any,  # pylint: disable=unused-argument
    value: Optional[str],
) -> Optional[str]:
    """Strips whitespace from an option value, treating blank values as not given

    Args:
        ctx (Any): click option context
        param (Any): click option
        value (Optional[str]): the raw value

    Returns:
        Optional[str]: the stripped value, or None if nothing is left
    """
    if value is None:
        return None
    value = value.strip()
    return value or None
