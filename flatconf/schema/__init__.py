"""Schema loading and validation components."""

from .loader import SchemaLoader
from .validator import SchemaValidator

__all__ = ["SchemaLoader", "SchemaValidator"]
