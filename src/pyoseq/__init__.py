from ._core import Config, get_config, set_config
from ._iter import DoubleEndedIter, ExactSizeIter, Iter, into_iter
from ._range import irange, range, range_gen, range_params  # noqa: A004
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._types import Enumerated, Item, Predicate, Producer

__all__ = [
    "NONE",
    "Config",
    "DoubleEndedIter",
    "Enumerated",
    "ExactSizeIter",
    "Item",
    "Iter",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Predicate",
    "Producer",
    "Some",
    "get_config",
    "into_iter",
    "irange",
    "range",
    "range_gen",
    "range_params",
    "set_config",
]
