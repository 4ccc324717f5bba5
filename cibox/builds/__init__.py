"""Matrix expansion and build naming."""

from .matrix import Combination, Matrix
from .naming import Naming, get_naming


__all__ = ["Combination", "Matrix", "Naming", "get_naming"]
