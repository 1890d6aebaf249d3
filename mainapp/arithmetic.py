"""
Arithmetic unit: integer addition resolved through the primitive registry.
"""

from __future__ import annotations

import logging

from mainapp.policy import OverflowPolicy
from mainapp.primitives.registry import PrimitiveRegistry, get_default_registry

logger = logging.getLogger("mainapp.arithmetic")

ADDITION_PRIMITIVE = "default.addition"


class ArithmeticUnit:
    """Stateless integer arithmetic.

    ``policy`` pins the overflow policy for this unit. When it is None the
    active policy (runtime override, then environment) is looked up on every
    call.
    """

    def __init__(
        self,
        policy: OverflowPolicy | None = None,
        registry: PrimitiveRegistry | None = None,
    ) -> None:
        self.policy = policy
        self._registry = registry if registry is not None else get_default_registry()
        self._add_spec = self._registry.get_spec(ADDITION_PRIMITIVE)
        self._add_spec.check_operands(2)
        self._add_kernel = self._registry.load_kernel(ADDITION_PRIMITIVE)
        logger.debug(
            "ArithmeticUnit bound to %s (policy=%s)",
            self._add_spec.qualified_name,
            policy,
        )

    def add(self, a: int, b: int) -> int:
        """Return ``a + b``."""
        return self._add_kernel(a, b, policy=self.policy)


_DEFAULT_UNIT: ArithmeticUnit | None = None


def _default_unit() -> ArithmeticUnit:
    global _DEFAULT_UNIT
    if _DEFAULT_UNIT is None:
        _DEFAULT_UNIT = ArithmeticUnit()
    return _DEFAULT_UNIT


def add(a: int, b: int) -> int:
    """Add two integers with the shared arithmetic unit."""
    return _default_unit().add(a, b)
