from .errors import BeforeMinimum, InvalidOrder, ValidationError
from .validator import validate

__all__ = ["validate", "ValidationError", "InvalidOrder", "BeforeMinimum"]
