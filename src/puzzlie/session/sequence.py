"""Playback of scripted opponent replies from the solution."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from puzzlie.core.errors import DataIntegrityError, RulesError
from puzzlie.core.move import PuzzleMove
from puzzlie.core.rules import IRulesEngine

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReplyResult:
    """Position after a scripted reply, or the unchanged one plus the error."""

    position: str
    error: DataIntegrityError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SequencePlayer:
    """Applies precomputed replies without validating them against the solution.

    Solution data is trusted; a reply the rules engine refuses is reported
    as a :class:`DataIntegrityError` instead of being raised.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: IRulesEngine) -> None:
        self._rules = rules

    def play(
        self, puzzle_id: str, position: str, move: PuzzleMove, index: int | None
    ) -> ReplyResult:
        try:
            return ReplyResult(self._rules.apply(position, move))
        except RulesError as exc:
            error = DataIntegrityError(puzzle_id, index, f"cannot play {move}: {exc}")
            _LOGGER.error("Data integrity failure: %s", error)
            return ReplyResult(position, error)
