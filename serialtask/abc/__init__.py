# pylint: disable=missing-docstring
from .exceptions import SerialTaskException, ThenableRejectedError
