"""Shared fixtures for scoreboard tests."""

import pytest
from loguru import logger

from icpc_board.board import RecordingReporter, ScoreboardEngine


@pytest.fixture(autouse=True)
def quiet_logger():
    """Drop loguru sinks so warnings never hit a closed stream."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def engine(reporter):
    return ScoreboardEngine(reporter=reporter)


@pytest.fixture
def started(engine):
    """Engine with three teams and four problems, not yet frozen."""
    for name in ("alpha", "bravo", "charlie"):
        engine.add_team(name)
    engine.start(300, 4)
    return engine
