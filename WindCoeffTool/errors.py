from __future__ import annotations


class WindCoeffError(Exception):
    """Base class for errors raised by coefficient lookups."""
    pass


class InvalidInputError(WindCoeffError, ValueError):
    """Caller input rejected before any lookup (schema validation failure)."""
    pass


class InvalidGeometryError(InvalidInputError):
    """Caller supplied geometry that cannot describe a building (e.g. length <= 0)."""
    pass


class TableIntegrityError(WindCoeffError, RuntimeError):
    """An embedded coefficient table violates its own shape (missing grid cell).

    Not recoverable: the table constants are malformed, the caller did nothing wrong.
    """
    pass
