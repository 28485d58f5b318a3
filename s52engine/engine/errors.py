"""Exception taxonomy for the symbology engine.

Missing attributes are never errors: procedures resolve them with sentinel
defaults. Unknown or sub-procedure CS keywords at top level are a no-op.
"""

from __future__ import annotations


class S52EngineError(Exception):
    """Base class for all engine errors."""


class PreconditionError(S52EngineError, ValueError):
    """A procedure was handed a feature it cannot legally symbolize.

    This points at a caller bug (wrong CS assigned to a feature type) and
    aborts evaluation of that one feature.
    """


class DirectiveError(PreconditionError):
    """A feature reached the dispatcher without exactly one CS directive."""
