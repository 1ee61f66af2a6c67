"""
Error conditions raised by the Starling model.

Both derive from ValueError so callers that already guard numeric input
with ``except ValueError`` keep working.
"""


class InvalidArgument(ValueError):
    """An argument is outside the domain the operation supports (e.g. steps <= 0)."""


class InvalidInput(ValueError):
    """A numeric input is NaN or infinite."""
