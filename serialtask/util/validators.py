""" validators to use with `attrs` fields"""

from collections.abc import Sequence

from serialtask.options_error import InvalidConfigurationError


def str_validator(_, attribute, value):
    """validate if an attribute is a str"""
    if not isinstance(value, str):
        raise InvalidConfigurationError(f"'{attribute.name}' must be a str or omitted")


def callable_validator(_, attribute, value):
    """validate if an attribute is callable"""
    if not callable(value):
        raise InvalidConfigurationError(f"'{attribute.name}' must be callable or omitted")


def is_sequence_validator(attribute, value):
    """Validates if an argument is a sequence but not a string like sequence"""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise InvalidConfigurationError(f"'{attribute.name}' must be a sequence of callables")


def sequence_of_callables_validator(_, attribute, value):
    """validate if a sequence holds only callables"""
    is_sequence_validator(attribute, value)
    for index, element in enumerate(value):
        if not callable(element):
            raise InvalidConfigurationError(
                f"'{attribute.name}' must be a sequence of callables, "
                f"element {index} is {type(element).__name__}"
            )
