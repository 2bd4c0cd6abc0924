"""This module contains errors related to the normalization of serial task options."""

from serialtask.abc.exceptions import SerialTaskException


class InvalidConfigurationError(SerialTaskException, TypeError):
    """Raise if the options are invalid."""


class InvalidOptionsSpecificationError(InvalidConfigurationError):
    """Raise if the options were not specified as a mapping."""

    def __init__(self, given):
        super().__init__(f"'options' must be a mapping, got {type(given).__name__}")


class UnknownOptionError(InvalidConfigurationError):
    """Raise if the options contain keys that are not known."""

    def __init__(self, unknown_keys):
        super().__init__(f"following keys are unknown: {sorted(map(str, unknown_keys))}")
