"""Declaration contract for arithmetic primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

KernelFn = Callable[..., Any]


@dataclass(frozen=True)
class PrimitiveSpec:
    """What a primitive module declares next to its kernel."""

    name: str
    operand_count: int
    namespace: str = "default"
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or "." in self.name:
            raise ValueError(f"Primitive name must be a bare identifier: {self.name!r}")
        if not self.namespace:
            raise ValueError("Primitive namespace cannot be empty")
        if self.operand_count < 1:
            raise ValueError(f"Primitive {self.name} needs at least one operand")

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}"

    def check_operands(self, count: int) -> None:
        if count != self.operand_count:
            raise ValueError(
                f"{self.qualified_name} takes {self.operand_count} operands, got {count}"
            )
