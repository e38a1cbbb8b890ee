"""Billed-unit counters for one pipeline run."""

import logging
import threading
from dataclasses import dataclass


logger = logging.getLogger("usage")


@dataclass(frozen=True)
class UsageCounters:
    """Point-in-time copy of the tracker counters."""

    chat_input_tokens: int = 0
    chat_output_tokens: int = 0
    audio_characters: int = 0


class UsageTracker:
    """
    Accumulates chat tokens and audio characters billed during a run.

    One tracker is owned by the orchestrator and handed to the generators.
    Additions may come from concurrent branches, so each one holds the lock
    for the read-modify-write.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._chat_input_tokens = 0
        self._chat_output_tokens = 0
        self._audio_characters = 0

    def reset(self) -> None:
        with self._lock:
            self._chat_input_tokens = 0
            self._chat_output_tokens = 0
            self._audio_characters = 0
        logger.debug("Usage counters reset")

    def add_chat_input_tokens(self, count: int) -> None:
        _check_count(count)
        with self._lock:
            self._chat_input_tokens += count

    def add_chat_output_tokens(self, count: int) -> None:
        _check_count(count)
        with self._lock:
            self._chat_output_tokens += count

    def add_audio_characters(self, count: int) -> None:
        _check_count(count)
        with self._lock:
            self._audio_characters += count

    def get_chat_input_tokens(self) -> int:
        with self._lock:
            return self._chat_input_tokens

    def get_chat_output_tokens(self) -> int:
        with self._lock:
            return self._chat_output_tokens

    def get_audio_characters(self) -> int:
        with self._lock:
            return self._audio_characters

    def snapshot(self) -> UsageCounters:
        """Return all three counters read under one lock acquisition."""
        with self._lock:
            return UsageCounters(
                chat_input_tokens=self._chat_input_tokens,
                chat_output_tokens=self._chat_output_tokens,
                audio_characters=self._audio_characters,
            )


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"Usage counts cannot be negative (got {count})")
