from ._dispatch import into_iter
from ._double import DoubleEndedIter
from ._main import Iter
from ._sized import ExactSizeIter

__all__ = ["DoubleEndedIter", "ExactSizeIter", "Iter", "into_iter"]
