"""Dense linear programming helpers backing the optimistic bound."""

from .simplex import simplex_solve
from .utils import build_standard_form

__all__ = ["simplex_solve", "build_standard_form"]
