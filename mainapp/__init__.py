"""
MainApp - integer arithmetic unit
"""

from mainapp.arithmetic import ArithmeticUnit, add
from mainapp.error_msg import IntegerOverflowError, MainAppException, OperandTypeError
from mainapp.version import __version__

__all__ = [
    "ArithmeticUnit",
    "IntegerOverflowError",
    "MainAppException",
    "OperandTypeError",
    "__version__",
    "add",
]
