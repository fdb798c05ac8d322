"""
Core components for propdoc.
"""
from .error_handling import (
    PropDocError, ParsingError, SourceSyntaxError, ExtractionError, ValidationError
)
from .config import config

__all__ = [
    "ExtractionError",
    "ParsingError",
    "PropDocError",
    "SourceSyntaxError",
    "ValidationError",
    "config",
]
