"""
Error handling utilities for propdoc.

This module provides the exception hierarchy used throughout propdoc. Every
exception carries an optional context dictionary which is rendered by
``__str__`` so that log lines and CLI messages show where a failure happened.
"""
import functools
import logging
from typing import Optional, Type, Any, Callable, Tuple, Union

logger = logging.getLogger('propdoc')

class PropDocError(Exception):
    """Base class for all propdoc exceptions.

    All exceptions specific to propdoc should inherit from this class to allow
    for consistent error handling and identification.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = dict(kwargs.get('context', {}))

        for key, value in kwargs.items():
            if key != 'context':
                self.context[key] = value

        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the exception.

        Args:
            key: The context key
            value: The context value
        """
        self.context[key] = value

    def __str__(self) -> str:
        """Return the message, followed by the context when there is any."""
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items() if v is not None)
        if not context_str:
            return self.message
        return f"{self.message} [Context: {context_str}]"

# ===== Validation Errors =====

class ValidationError(PropDocError):
    """Exception raised for input validation failures."""
    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Optional[Any] = None, expected: Optional[str] = None, **kwargs):
        super().__init__(message, parameter=parameter, value=value, expected=expected, **kwargs)
        self.parameter = parameter
        self.value = value
        self.expected = expected

class MissingParameterError(ValidationError):
    """Exception raised when a required parameter is missing."""
    def __init__(self, parameter: str, **kwargs):
        message = f"Required parameter '{parameter}' is missing"
        super().__init__(message, parameter=parameter, **kwargs)

class InvalidParameterError(ValidationError):
    """Exception raised when a parameter has an invalid value."""
    def __init__(self, parameter: str, value: Any, expected: str, **kwargs):
        message = f"Invalid value for parameter '{parameter}': {value!r}. Expected: {expected}"
        super().__init__(message, parameter=parameter, value=value, expected=expected, **kwargs)

class InvalidTypeError(ValidationError):
    """Exception raised when a parameter has an incorrect type."""
    def __init__(self, parameter: str, value: Any, expected_type: Union[Type, Tuple[Type, ...], str], **kwargs):
        if isinstance(expected_type, str):
            expected_type_str = expected_type
        elif isinstance(expected_type, tuple):
            expected_type_str = ', '.join(t.__name__ for t in expected_type)
        else:
            expected_type_str = expected_type.__name__
        message = f"Invalid type for parameter '{parameter}': {type(value).__name__}. Expected: {expected_type_str}"
        super().__init__(message, parameter=parameter, value=value, expected=expected_type_str, **kwargs)

# ===== Configuration Errors =====

class ConfigurationError(PropDocError):
    """Exception raised for issues with configuration settings."""
    pass

class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a configuration setting has an invalid value."""
    def __init__(self, setting: str, value: Any, reason: str, **kwargs):
        message = f"Invalid configuration setting '{setting}': {value}. Reason: {reason}"
        super().__init__(message, setting=setting, value=value, reason=reason, **kwargs)

# ===== Parsing Errors =====

class ParsingError(PropDocError):
    """Exception raised when source text cannot be turned into a syntax tree.

    A documentation pass over a partially invalid declaration is not useful,
    so this error is fatal for the file being processed.
    """
    def __init__(self, message: str, code_snippet: Optional[str] = None,
                 position: Optional[Tuple[int, int]] = None, **kwargs):
        super().__init__(message, code_snippet=code_snippet, position=position, **kwargs)
        self.code_snippet = code_snippet
        self.position = position

class SourceSyntaxError(ParsingError):
    """Exception raised for syntax errors in the source code being parsed."""
    def __init__(self, message: str, language: str, code_snippet: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None, **kwargs):
        position = (line, column) if line is not None and column is not None else None
        super().__init__(
            message, code_snippet=code_snippet, position=position,
            language=language, line=line, column=column, **kwargs
        )
        self.language = language
        self.line = line
        self.column = column

# ===== Extraction Errors =====

class ExtractionError(PropDocError):
    """Exception raised when documentation cannot be generated for a component."""
    def __init__(self, message: str, component: Optional[str] = None, **kwargs):
        super().__init__(message, component=component, **kwargs)
        self.component = component

# ===== Utility Decorators =====

def wrap_extraction_errors(func: Callable) -> Callable:
    """
    Decorator turning unexpected failures of a per-component step into
    ``ExtractionError``. propdoc errors pass through unchanged.

    Args:
        func: The function to wrap

    Returns:
        Wrapped function
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PropDocError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"I/O error during {func.__name__}: {e}")
            raise ExtractionError(f"Could not read component source: {e}", operation=func.__name__) from e

    return wrapper
