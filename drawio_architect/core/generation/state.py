"""Generation state machine states.

Exactly one GenerationState is live at a time. States are immutable
snapshots; every transition replaces the previous one.

Dependencies: dataclasses, enum
System role: Single source of truth the presentation layer observes
"""

from dataclasses import dataclass
from enum import Enum


class GenerationStatus(str, Enum):
    """Lifecycle position of the orchestrator."""

    IDLE = "idle"
    ANALYZING = "analyzing"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


BUSY_STATUSES = frozenset({GenerationStatus.ANALYZING, GenerationStatus.GENERATING})


@dataclass(frozen=True)
class GenerationState:
    """Immutable snapshot of the orchestrator.

    Attributes:
        status: Current lifecycle position
        artifact: Recovered diagram XML, only when READY
        error: Failure cause, only when FAILED
        description: Editable description the user is working from
    """

    status: GenerationStatus
    artifact: str | None = None
    error: Exception | None = None
    description: str | None = None

    @property
    def busy(self) -> bool:
        return self.status in BUSY_STATUSES

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return getattr(self.error, "message", None) or str(self.error)

    @property
    def error_kind(self) -> str | None:
        if self.error is None:
            return None
        return getattr(self.error, "kind", type(self.error).__name__)

    @classmethod
    def idle(cls, description: str | None = None) -> "GenerationState":
        return cls(status=GenerationStatus.IDLE, description=description)

    @classmethod
    def analyzing(cls) -> "GenerationState":
        return cls(status=GenerationStatus.ANALYZING)

    @classmethod
    def generating(cls, description: str) -> "GenerationState":
        return cls(status=GenerationStatus.GENERATING, description=description)

    @classmethod
    def ready(cls, artifact: str, description: str | None = None) -> "GenerationState":
        return cls(status=GenerationStatus.READY, artifact=artifact, description=description)

    @classmethod
    def failed(cls, error: Exception, description: str | None = None) -> "GenerationState":
        return cls(status=GenerationStatus.FAILED, error=error, description=description)
