"""
Generation state machine.

Exports: GenerationOrchestrator, GenerationState, GenerationStatus
"""

from drawio_architect.core.generation.orchestrator import GenerationOrchestrator, StateListener
from drawio_architect.core.generation.state import GenerationState, GenerationStatus

__all__ = ["GenerationOrchestrator", "GenerationState", "GenerationStatus", "StateListener"]
