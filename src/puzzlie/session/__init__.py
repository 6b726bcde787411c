"""Puzzle session layer: state machine, validators, hints, scheduling.

Quick start::

    from puzzlie.core import Puzzle
    from puzzlie.session import PuzzleSession, SessionConfig

    session = PuzzleSession(config=SessionConfig.instant())
    session.events.on_solve.append(lambda tries, hint: print(tries, hint))
    session.start(Puzzle.from_dict(data))
    session.submit_move("g1", "f3")

The Qt bridge lives in :mod:`puzzlie.session.qt_bridge` and is not imported
here so the core stays usable without a Qt event loop.
"""

from puzzlie.session.attempts import AttemptSummary, AttemptTracker
from puzzlie.session.controller import PuzzleSession, SessionEvents
from puzzlie.session.hints import HintProvider
from puzzlie.session.interfaces import (
    IPuzzleSession,
    IScheduledTask,
    IScheduler,
    MoveVerdict,
    SessionConfig,
    SessionStatus,
)
from puzzlie.session.scheduler import CallbackTask, ImmediateScheduler, ManualScheduler
from puzzlie.session.sequence import ReplyResult, SequencePlayer
from puzzlie.session.validator import MoveValidator

__all__ = [
    # Interfaces
    "IPuzzleSession",
    "IScheduledTask",
    "IScheduler",
    "MoveVerdict",
    "SessionConfig",
    "SessionStatus",
    # Concrete
    "AttemptSummary",
    "AttemptTracker",
    "CallbackTask",
    "HintProvider",
    "ImmediateScheduler",
    "ManualScheduler",
    "MoveValidator",
    "PuzzleSession",
    "ReplyResult",
    "SequencePlayer",
    "SessionEvents",
]
