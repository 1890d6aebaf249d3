"""Native integer width and overflow policy resolution."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, Literal
import logging
import os

from mainapp.error_msg import IntegerOverflowError

logger = logging.getLogger("mainapp.policy")

OverflowMode = Literal["error", "wrap", "saturate"]

OVERFLOW_MODE_ENV = "MAINAPP_OVERFLOW_MODE"
INT_WIDTH_ENV = "MAINAPP_INT_WIDTH"

_OVERFLOW_MODES = ("error", "wrap", "saturate")
_INT_WIDTHS = (8, 16, 32, 64)
_DEFAULT_MODE: OverflowMode = "error"
_DEFAULT_WIDTH = 64


@dataclass(frozen=True)
class OverflowPolicy:
    """Signed two's-complement width and what to do when a sum leaves it."""

    mode: OverflowMode = _DEFAULT_MODE
    width_bits: int = _DEFAULT_WIDTH

    def __post_init__(self) -> None:
        if self.mode not in _OVERFLOW_MODES:
            raise ValueError(f"Invalid overflow mode: {self.mode}")
        if self.width_bits not in _INT_WIDTHS:
            raise ValueError(f"Invalid integer width: {self.width_bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.width_bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.width_bits - 1)) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def apply(self, value: int) -> int:
        """Map an exact result onto the native range according to ``mode``."""
        if self.contains(value):
            return value

        if self.mode == "wrap":
            span = 1 << self.width_bits
            return ((value - self.min_value) % span) + self.min_value
        if self.mode == "saturate":
            return self.max_value if value > self.max_value else self.min_value

        raise IntegerOverflowError(
            f"Integer overflow: {value} does not fit in int{self.width_bits}",
            value=value,
            policy=self,
        )

    def to_dict(self) -> dict[str, object]:
        return {"mode": self.mode, "width_bits": self.width_bits}


_RUNTIME_POLICY: ContextVar[OverflowPolicy | None] = ContextVar(
    "mainapp_runtime_overflow_policy",
    default=None,
)


def _env_mode() -> OverflowMode:
    requested = os.environ.get(OVERFLOW_MODE_ENV, "").strip().lower()
    if not requested:
        return _DEFAULT_MODE
    if requested in _OVERFLOW_MODES:
        return requested  # type: ignore[return-value]
    logger.warning(
        "Ignoring %s=%r (expected one of %s)",
        OVERFLOW_MODE_ENV,
        requested,
        ", ".join(_OVERFLOW_MODES),
    )
    return _DEFAULT_MODE


def _env_width() -> int:
    requested = os.environ.get(INT_WIDTH_ENV, "").strip()
    if not requested:
        return _DEFAULT_WIDTH
    try:
        width = int(requested)
    except ValueError:
        width = -1
    if width in _INT_WIDTHS:
        return width
    logger.warning(
        "Ignoring %s=%r (expected one of %s)",
        INT_WIDTH_ENV,
        requested,
        ", ".join(str(item) for item in _INT_WIDTHS),
    )
    return _DEFAULT_WIDTH


def resolve_overflow_policy() -> OverflowPolicy:
    """Resolve overflow policy from environment variables."""
    return OverflowPolicy(mode=_env_mode(), width_bits=_env_width())


def current_overflow_policy() -> OverflowPolicy:
    """Return the runtime override if one is active, else the environment policy."""
    policy = _RUNTIME_POLICY.get()
    if policy is not None:
        return policy
    return resolve_overflow_policy()


@contextmanager
def runtime_overflow_policy(policy: OverflowPolicy) -> Iterator[OverflowPolicy]:
    """Temporarily install ``policy`` for the current context."""
    token = _RUNTIME_POLICY.set(policy)
    try:
        yield policy
    finally:
        _RUNTIME_POLICY.reset(token)
