"""
MainApp error types
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mainapp.policy import OverflowPolicy


class MainAppException(Exception):
    """Base class for errors raised by the arithmetic unit"""

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)


class OperandTypeError(MainAppException, TypeError):
    """Raised when an operand is not a plain integer"""


class IntegerOverflowError(MainAppException, OverflowError):
    """Raised when a value does not fit the configured integer width"""

    def __init__(self, msg: str, value: int, policy: "OverflowPolicy"):
        self.value = value
        self.policy = policy
        super().__init__(msg)
