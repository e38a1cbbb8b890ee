"""
Pipeline stage wrapper and validation gate.

execute_stage runs one unit of work with uniform status output and
containment of generation errors. validate_stage turns its result into a
continue / restart / stop decision.
"""

import logging
from typing import Awaitable, Callable, TypeVar

from podcastr.llm import GenerationError
from .console import OperatorConsole
from .results import GateDecision, StageResult


T = TypeVar("T")

logger = logging.getLogger("pipeline")


async def execute_stage(
    label: str,
    operation: Callable[[], Awaitable[T]],
    console: OperatorConsole,
) -> StageResult[T]:
    """
    Run one stage and wrap its outcome.

    Args:
        label: Human-readable stage description (e.g. "Generating podcast audio")
        operation: Zero-argument coroutine function doing the work
        console: Operator console for the status line

    Returns:
        StageResult holding the value, EMPTY for a falsy value, or FAILED
        if the operation raised GenerationError. Other exceptions propagate.
    """
    console.write_message(f"{label}...")
    logger.info(f"Starting stage: {label}")
    try:
        value = await operation()
    except GenerationError as e:
        console.write_error(f"{label} failed: {e}")
        logger.error(f"Stage '{label}' failed: {e}", exc_info=True)
        return StageResult.failed(e)

    result = StageResult.of(value)
    logger.info(f"Stage '{label}' finished with status {result.status.value}")
    return result


def validate_stage(
    result: StageResult, label: str, console: OperatorConsole
) -> GateDecision:
    """
    Decide whether the run can continue past a stage.

    On failure the operator is told which stage failed and asked whether
    to restart the whole run.

    Args:
        result: Outcome of the stage
        label: Stage name used in the failure message
        console: Operator console

    Returns:
        GateDecision(passed=True) or GateDecision(passed=False, restart=<answer>)
    """
    if result.passed:
        return GateDecision(passed=True)

    logger.warning(f"Validation failed for '{label}' (status {result.status.value})")
    console.write_error(f"{label} failed.")
    restart = console.confirm("Do you want to restart the process?", True)
    return GateDecision(passed=False, restart=restart)
