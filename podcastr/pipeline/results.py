"""
Typed stage outcomes and pipeline states.

Enums:
    StageStatus: Outcome of one unit of work
    PipelineState: States of the run orchestrator

Models:
    StageResult: Outcome plus value or error of one stage
    GateDecision: Verdict of the validation gate
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class StageStatus(str, Enum):
    """
    Outcome of a stage.

        OK: The stage produced a usable value
        EMPTY: The stage completed but produced nothing (None, "", b"", ...)
        FAILED: The stage raised a generation error
    """

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


class PipelineState(str, Enum):
    """
    States of one pipeline run, in the order a successful run visits them.

    Every state may fall back to AWAITING_INPUT (operator restarts) or to
    TERMINATED (operator declines) when its validation gate fails.
    """

    AWAITING_INPUT = "awaiting_input"
    FETCHING_CONTENT = "fetching_content"
    GENERATING_SCRIPT = "generating_script"
    GENERATING_DERIVATIVES = "generating_derivatives"
    VALIDATING = "validating"
    BUILDING_ARCHIVE = "building_archive"
    REPORTING = "reporting"
    AWAITING_REPEAT_DECISION = "awaiting_repeat_decision"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class StageResult(Generic[T]):
    status: StageStatus
    value: Optional[T] = None
    error: Optional[Exception] = None

    @classmethod
    def of(cls, value: Optional[T]) -> "StageResult[T]":
        """Wrap a produced value; any falsy value or blank text counts as empty."""
        if not value or (isinstance(value, str) and not value.strip()):
            return cls(StageStatus.EMPTY)
        return cls(StageStatus.OK, value=value)

    @classmethod
    def failed(cls, error: Exception) -> "StageResult[T]":
        return cls(StageStatus.FAILED, error=error)

    @property
    def passed(self) -> bool:
        return self.status is StageStatus.OK


@dataclass(frozen=True)
class GateDecision:
    """Whether the run may continue and, if not, whether to start over."""

    passed: bool
    restart: bool = False
