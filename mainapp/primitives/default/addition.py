"""
Addition primitive for MainApp

Implements addition for native-width signed integers.
"""

from __future__ import annotations

import logging

from mainapp.error_msg import IntegerOverflowError, OperandTypeError
from mainapp.policy import OverflowPolicy, current_overflow_policy
from mainapp.primitives.api import PrimitiveSpec

logger = logging.getLogger("mainapp.primitives.addition")


def _check_operand(name, value, policy):
    # bool is an int subclass but not an integer operand here
    if isinstance(value, bool) or not isinstance(value, int):
        raise OperandTypeError(
            f"Addition failed: {name} must be an int, got {type(value).__name__}"
        )
    if not policy.contains(value):
        raise IntegerOverflowError(
            f"Addition failed: {name}={value} does not fit in int{policy.width_bits}",
            value=value,
            policy=policy,
        )


def execute(left, right, policy: OverflowPolicy | None = None):
    """
    Execute addition operation

    Args:
        left: Left operand (int)
        right: Right operand (int)
        policy: Overflow policy; the active policy is used when omitted

    Returns:
        Sum of left and right, mapped onto the policy's range
    """
    if policy is None:
        policy = current_overflow_policy()

    _check_operand("left", left, policy)
    _check_operand("right", right, policy)

    exact = left + right
    result = policy.apply(exact)
    if result != exact:
        logger.debug(
            "Addition %d + %d overflowed int%d, %s to %d",
            left,
            right,
            policy.width_bits,
            "wrapped" if policy.mode == "wrap" else "saturated",
            result,
        )
    return result


KERNEL = execute
PRIMITIVE_SPEC = PrimitiveSpec(
    name="addition",
    namespace="default",
    operand_count=2,
    description="Addition operation for native-width integers",
)
