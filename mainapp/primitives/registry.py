"""Lookup table from primitive names to their kernels."""

from __future__ import annotations

from pathlib import Path
from threading import Lock
import importlib
import logging

from mainapp.primitives.api import KernelFn, PrimitiveSpec

logger = logging.getLogger(__name__)


class PrimitiveRegistry:
    """Primitives of one namespace package, keyed by qualified name.

    Every public module of ``mainapp.primitives.<namespace>`` must declare
    ``PRIMITIVE_SPEC`` and ``KERNEL``. Modules are scanned in file-name order
    and a namespace is registered all at once or not at all.
    """

    def __init__(self, namespace: str = "default") -> None:
        self._entries: dict[str, tuple[PrimitiveSpec, KernelFn]] = {}
        self.load_namespace(namespace)

    def load_namespace(self, namespace: str) -> None:
        package = importlib.import_module(f"mainapp.primitives.{namespace}")
        package_dir = Path(package.__file__).parent

        found: list[tuple[PrimitiveSpec, KernelFn]] = []
        for py_file in sorted(package_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module = importlib.import_module(f"{package.__name__}.{py_file.stem}")
            spec = getattr(module, "PRIMITIVE_SPEC", None)
            kernel = getattr(module, "KERNEL", None)
            if not isinstance(spec, PrimitiveSpec) or not callable(kernel):
                raise TypeError(
                    f"{module.__name__} must define PRIMITIVE_SPEC and KERNEL"
                )
            if spec.namespace != namespace:
                raise ValueError(
                    f"{module.__name__} declares namespace {spec.namespace!r}, "
                    f"expected {namespace!r}"
                )
            found.append((spec, kernel))

        staged = dict(self._entries)
        for spec, kernel in found:
            if spec.qualified_name in staged:
                raise ValueError(f"Primitive already registered: {spec.qualified_name}")
            staged[spec.qualified_name] = (spec, kernel)
        self._entries = staged
        logger.debug("Loaded %d primitive(s) from %s", len(found), namespace)

    def register(self, spec: PrimitiveSpec, kernel: KernelFn) -> None:
        if spec.qualified_name in self._entries:
            raise ValueError(f"Primitive already registered: {spec.qualified_name}")
        self._entries[spec.qualified_name] = (spec, kernel)

    def _entry(self, name: str) -> tuple[PrimitiveSpec, KernelFn]:
        qualified = name if "." in name else f"default.{name}"
        try:
            return self._entries[qualified]
        except KeyError:
            raise KeyError(f"Unknown primitive: {name}") from None

    def get_spec(self, name: str) -> PrimitiveSpec:
        return self._entry(name)[0]

    def load_kernel(self, name: str) -> KernelFn:
        return self._entry(name)[1]

    def list_namespaces(self) -> list[str]:
        return sorted({spec.namespace for spec, _ in self._entries.values()})

    def list_primitives(self, namespace: str | None = None) -> dict[str, str]:
        return {
            qualified: spec.description or "Primitive"
            for qualified, (spec, _) in sorted(self._entries.items())
            if namespace is None or spec.namespace == namespace
        }


_DEFAULT_REGISTRY: PrimitiveRegistry | None = None
_DEFAULT_REGISTRY_LOCK = Lock()


def get_default_registry() -> PrimitiveRegistry:
    """Return the shared registry, creating it on first use."""
    global _DEFAULT_REGISTRY
    with _DEFAULT_REGISTRY_LOCK:
        if _DEFAULT_REGISTRY is None:
            _DEFAULT_REGISTRY = PrimitiveRegistry()
        return _DEFAULT_REGISTRY
