# -*- coding: utf-8 -*-
"""
Common exceptions for the business objects layer.
"""


class SchemaError(ValueError):
    """Raised when an input file (text/JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when the in-memory state violates domain constraints."""


class InvalidCapacityError(StateValidationError):
    """Raised when a capacity cannot be used as a non-negative integer bound."""


class TableAllocationError(MemoryError):
    """Raised when a solver cannot allocate its working buffers."""
