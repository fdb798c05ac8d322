"""
Input validation helpers for propdoc.

Validator functions raise the validation errors from
``propdoc.core.error_handling``; ``validate_params`` applies them to function
arguments declaratively.
"""
import functools
import inspect
from typing import Any, Callable, Dict, Tuple, Type, TypeVar, Union

from propdoc.core.error_handling import (
    InvalidParameterError,
    InvalidTypeError,
    MissingParameterError,
)

# Type variable for function return type
T = TypeVar('T')


def validate_type(value: Any, expected_type: Union[Type, Tuple[Type, ...]],
                  param_name: str) -> None:
    """
    Validate that a value is of the expected type.

    Args:
        value: The value to check
        expected_type: The expected type(s)
        param_name: The parameter name for error messages

    Raises:
        InvalidTypeError: If the value is not of the expected type
    """
    if value is None:
        return

    if not isinstance(value, expected_type):
        raise InvalidTypeError(param_name, value, expected_type)


def validate_not_empty(value: Any, param_name: str) -> None:
    """
    Validate that a value is not empty (string, list, dict, etc).

    Raises:
        InvalidParameterError: If the value is empty
    """
    if value is None:
        return

    if hasattr(value, '__len__') and len(value) == 0:
        raise InvalidParameterError(
            param_name, value, "non-empty value"
        )


def validate_params(**param_validators: Dict[str, Any]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to validate function parameters according to specified rules.

    Example:
    ```python
    @validate_params(
        name={"type": str, "not_empty": True},
        code={"type": str},
    )
    def parse(self, name, code):
        ...
    ```

    Supported rules: ``type`` and ``not_empty``. A None argument is always rejected.
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        sig = inspect.signature(func)

        for param_name in param_validators:
            if param_name not in sig.parameters:
                raise ValueError(
                    f"Parameter '{param_name}' specified in validator does not exist in function {func.__name__}"
                )

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()
            params = bound_args.arguments

            for param_name, validator in param_validators.items():
                value = params.get(param_name)

                if value is None:
                    raise MissingParameterError(param_name)

                if 'type' in validator:
                    validate_type(value, validator['type'], param_name)

                if validator.get('not_empty', False):
                    validate_not_empty(value, param_name)

            return func(*args, **kwargs)

        return wrapper

    return decorator
