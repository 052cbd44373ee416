"""Codebook enumerations for the tour catalog.

Each module holds LabeledEnum classes for one coded variable together with
any fixed text keyed by those codes.

Available modules:
- tours: Tour variant codebook and planning messages
"""

from . import tours

__all__ = ["tours"]
