"""Common shape of the entitlement pipeline stages.

The four stages (severance estimate, cost options, recommendation, guidance)
are pure computations over their keyword arguments and the read-only
jurisdiction tables, so a single shared instance of each serves every request.
"""

from abc import ABC, abstractmethod
from typing import Any
import logging

logger = logging.getLogger(__name__)


class BaseStageService(ABC):
    """A named pipeline step with a one-time readiness check.

    ``load`` verifies whatever reference tables the stage reads and runs once
    per instance, the first time ``run`` is called or when stage_registry
    preloads it. ``run`` returns the stage's pydantic result and keeps no
    per-request state.
    """

    stage_name: str = ""
    _loaded: bool = False

    @abstractmethod
    def load(self) -> None:
        """Check the reference tables this stage depends on."""

    @abstractmethod
    def run(self, **kwargs: Any) -> Any:
        ...

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        if self._loaded:
            return
        self.load()
        self._loaded = True
        logger.info("Stage ready: %s", self.stage_name)
