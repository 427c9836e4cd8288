# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    StateValidationError,
    InvalidCapacityError,
    TableAllocationError,
)
from .items import Item
from .problem import Problem

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "InvalidCapacityError",
    "TableAllocationError",
    # core models
    "Item",
    "Problem",
]
