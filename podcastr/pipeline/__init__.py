"""
Podcast generation pipeline module.

This module orchestrates the complete episode workflow:
    1. Content loading (podcastr.ingestion)
    2. Script generation (podcastr.llm)
    3. Description, social posts, audio and cover generation, in parallel
    4. Validation of every artifact
    5. Archive creation (podcastr.storage)
    6. Cost report (podcastr.usage)

Usage:
    # CLI interface
    uv run -m podcastr.pipeline
    uv run -m podcastr.pipeline --verbose

    # Programmatic interface
    from podcastr.pipeline import PipelineOrchestrator
    await PipelineOrchestrator(generator, tracker, console).run()
"""

from .console import OperatorConsole, validate_text, validate_url
from .orchestrator import DERIVATIVE_STAGES, PipelineOrchestrator
from .results import GateDecision, PipelineState, StageResult, StageStatus
from .stages import execute_stage, validate_stage

__all__ = [
    # Orchestration
    "PipelineOrchestrator",
    "DERIVATIVE_STAGES",
    "PipelineState",
    # Stage execution and validation
    "execute_stage",
    "validate_stage",
    "StageResult",
    "StageStatus",
    "GateDecision",
    # Operator interface
    "OperatorConsole",
    "validate_text",
    "validate_url",
]
