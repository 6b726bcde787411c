"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from puzzlie.core.puzzle import Puzzle

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

# 1.e4 with Black to move.
AFTER_E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"


def _open_game_data(**overrides: object) -> dict[str, object]:
    """Puzzle descriptor: 1...e5 is auto-played, then Nf3 Nc6 Bc4."""
    data: dict[str, object] = {
        "id": "open-game",
        "playerColor": "white",
        "startFEN": AFTER_E4_FEN,
        "opponentMove": {"from": "e7", "to": "e5"},
        "solution": [
            {"from": "g1", "to": "f3"},
            {"from": "b8", "to": "c6"},
            {"from": "f1", "to": "c4"},
        ],
        "rating": "1450",
        "themes": ["opening", "development"],
        "gameUrl": "https://lichess.org/abcd1234",
    }
    data.update(overrides)
    return data


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for Qt tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def open_game_puzzle() -> Puzzle:
    return Puzzle.from_dict(_open_game_data())


@pytest.fixture
def open_game_data() -> Callable[..., dict[str, object]]:
    """Factory for the open-game descriptor with field overrides."""
    return _open_game_data
