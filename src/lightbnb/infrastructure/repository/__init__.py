"""
LightBnB repository package.

Repository Pattern:
- Accepts an AsyncEngine; the engine's pool hands out connections
- Statements run in AUTOCOMMIT; there is no multi-statement transaction
- Values are always bound as $n parameters, never formatted into SQL
- Log counts and error messages only; never log bound values
"""

from .core import LightBnbRepository, Record
from .property_ops import PROPERTY_COLUMNS

__all__ = [
    "LightBnbRepository",
    "PROPERTY_COLUMNS",
    "Record",
]
