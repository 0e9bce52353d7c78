"""Exceptions raised during TypeScript code generation."""


class CodegenError(Exception):
    """Base class for all code generation errors."""


class SchemaConstructionError(CodegenError):
    """The schema contains a combination that cannot be rendered.

    Raised for example when a oneOf input object declares a non-null field.
    """


class ConfigError(CodegenError):
    """The plugin configuration is invalid for the given schema."""


class SchemaValidationError(CodegenError):
    """The schema document does not describe a valid schema."""
