"""Custom exceptions raised by the examples."""


class ExampleError(Exception):
    """Top-level exception for anything raised on purpose by this project."""


class ConfigurationError(ExampleError):
    """Settings hold a value the project does not know how to use."""


class UnsupportedOperationError(ExampleError, NotImplementedError):
    """An operation is exposed by a type but not actually supported by one of its subtypes."""


class InvalidReadingError(ExampleError):
    """Vitals readings that cannot be measured (negative values etc.)."""
