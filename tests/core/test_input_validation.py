"""
Tests for the input validation helpers and the error hierarchy.
"""
import unittest

from propdoc.core.error_handling import (
    InvalidParameterError,
    InvalidTypeError,
    MissingParameterError,
    PropDocError,
    SourceSyntaxError,
    ValidationError,
)
from propdoc.core.input_validation import (
    validate_not_empty,
    validate_params,
    validate_type,
)


class BasicValidatorsTest(unittest.TestCase):
    """Tests for basic validator functions."""

    def test_validate_type(self):
        validate_type("name", str, "name")
        validate_type(None, str, "name")
        with self.assertRaises(InvalidTypeError) as context:
            validate_type(42, str, "name")
        self.assertEqual(context.exception.parameter, "name")
        self.assertIn("Expected: str", str(context.exception))

    def test_validate_not_empty(self):
        validate_not_empty("Widget", "name")
        with self.assertRaises(InvalidParameterError):
            validate_not_empty("", "name")


class ValidateParamsTest(unittest.TestCase):
    """Tests for the validate_params decorator."""

    def setUp(self):
        @validate_params(
            name={"type": str, "not_empty": True},
            code={"type": str},
        )
        def parse(name, code):
            return name, code

        self.parse = parse

    def test_valid_call(self):
        self.assertEqual(self.parse("Widget", ""), ("Widget", ""))

    def test_missing_parameter(self):
        with self.assertRaises(MissingParameterError):
            self.parse(None, "")

    def test_empty_parameter(self):
        with self.assertRaises(InvalidParameterError):
            self.parse("", "")

    def test_wrong_type(self):
        with self.assertRaises(InvalidTypeError):
            self.parse("Widget", b"bytes")

    def test_unknown_parameter_in_validator(self):
        with self.assertRaises(ValueError):
            @validate_params(missing={"type": str})
            def func(name):
                return name


class ErrorHierarchyTest(unittest.TestCase):
    """Tests for the exception hierarchy."""

    def test_validation_errors_are_propdoc_errors(self):
        self.assertTrue(issubclass(MissingParameterError, ValidationError))
        self.assertTrue(issubclass(ValidationError, PropDocError))

    def test_context_is_rendered(self):
        error = PropDocError("Failed", component="Widget")
        error.add_context("line", 3)
        self.assertEqual(str(error), "Failed [Context: component=Widget, line=3]")

    def test_syntax_error_position(self):
        error = SourceSyntaxError("Source could not be parsed", language="typescript", line=2, column=4)
        self.assertEqual(error.position, (2, 4))
        self.assertEqual(error.language, "typescript")
        self.assertIn("line=2", str(error))


if __name__ == "__main__":
    unittest.main()
