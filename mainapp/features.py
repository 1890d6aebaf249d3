"""
In-process feature facade over the arithmetic unit.

Handlers never raise: failures come back as an unsuccessful OperationResult.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
import logging

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError

from mainapp.error_msg import MainAppException

logger = logging.getLogger("mainapp.features")


class OperationResult(BaseModel):
    """Outcome of a feature call"""

    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class AddRequest(BaseModel):
    """Operands for the add feature; bools and numeric strings are rejected"""

    model_config = ConfigDict(frozen=True)

    a: StrictInt
    b: StrictInt


@dataclass(frozen=True)
class Feature:
    name: str
    description: str
    handler: Callable[..., OperationResult]


class FeatureRegistry:
    """Name to feature lookup shared by the whole process"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, name: str, description: str):
        def _decorator(handler: Callable[..., OperationResult]):
            cls._features[name] = Feature(name, description, handler)
            return handler

        return _decorator

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        return dict(cls._features)


@FeatureRegistry.register("version", "Get the MainApp version")
def handle_version(**kwargs) -> OperationResult:
    from mainapp.version import get_version

    return OperationResult(success=True, data={"version": get_version()})


@FeatureRegistry.register("add", "Add two native-width integers")
def handle_add(a: Any = None, b: Any = None, **kwargs) -> OperationResult:
    from mainapp.arithmetic import ArithmeticUnit
    from mainapp.policy import current_overflow_policy

    try:
        request = AddRequest(a=a, b=b)
    except ValidationError as e:
        logger.debug("Rejected add request: %s", e)
        return OperationResult(
            success=False,
            error=f"Invalid operands: {e.error_count()} validation error(s)",
        )

    policy = current_overflow_policy()
    try:
        result = ArithmeticUnit(policy=policy).add(request.a, request.b)
    except MainAppException as e:
        logger.info("Addition failed: %s", e)
        return OperationResult(success=False, error=str(e))

    return OperationResult(
        success=True, data={"result": result, "policy": policy.to_dict()}
    )


@FeatureRegistry.register("list-primitives", "List available primitives")
def handle_list_primitives(namespace: Optional[str] = None, **kwargs) -> OperationResult:
    from mainapp.primitives.registry import get_default_registry

    registry = get_default_registry()
    primitives = registry.list_primitives(namespace)
    if namespace is not None and not primitives:
        return OperationResult(
            success=False, error=f"Unknown primitive namespace: {namespace}"
        )
    return OperationResult(
        success=True,
        data={
            "primitives": primitives,
            "namespaces": registry.list_namespaces(),
            "namespace_filter": namespace,
        },
    )
