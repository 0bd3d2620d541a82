"""Lazy-loading registry for the entitlement pipeline stages.

Global singletons created on first use. Creation and loading happen under a
lock so the jurisdiction-table check in ``load()`` completes before any
concurrent caller sees the stage.
"""

import logging
import threading

from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

_registry: dict[str, BaseStageService] = {}
_lock = threading.Lock()


def _create_stage(name: str) -> BaseStageService:
    """Factory: create a stage service by name with deferred imports."""
    if name == "s1_severance_estimator":
        from services.pipeline.s1_severance_estimator import SeveranceEstimatorService
        return SeveranceEstimatorService()
    elif name == "s2_cost_options":
        from services.pipeline.s2_cost_options import CostOptionService
        return CostOptionService()
    elif name == "s3_recommendation":
        from services.pipeline.s3_recommendation import RecommendationService
        return RecommendationService()
    elif name == "s4_guidance":
        from services.pipeline.s4_guidance import GuidanceService
        return GuidanceService()
    else:
        raise ValueError(f"Unknown stage: {name}")


def get_stage(name: str) -> BaseStageService:
    """Get a stage service by name, creating and loading it on first access."""
    svc = _registry.get(name)
    if svc is not None and svc.is_loaded:
        return svc
    with _lock:
        if name not in _registry:
            _registry[name] = _create_stage(name)
        svc = _registry[name]
        svc.ensure_loaded()
    return svc


def preload(*names: str) -> None:
    """Pre-load multiple stages (e.g. at startup)."""
    for name in names:
        get_stage(name)


def clear() -> None:
    """Drop all stages. Useful for testing."""
    with _lock:
        _registry.clear()
