"""cibox - expand CI configuration matrices into container builds."""

from importlib.metadata import distribution

from .builds import Matrix, Naming
from .models import Build


__version__ = distribution(__package__ or "cibox").version

__all__ = [
    "Build",
    "Matrix",
    "Naming",
    "__version__",
]
