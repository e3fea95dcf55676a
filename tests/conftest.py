import datetime

import pytest
from loguru import logger

from rotolog.logger import reset_default


class FakeClock:
    """Callable clock returning `start`, then advancing by `step` on every call."""

    def __init__(self, start=datetime.datetime(2026, 10, 19, 9, 0, 0), step=datetime.timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def frozen_clock():
    return FakeClock(step=datetime.timedelta(0))


@pytest.fixture
def diagnostics():
    # collect rotolog's loguru output as (level, message) pairs
    messages = []
    handler_id = logger.add(
        lambda msg: messages.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
        filter=lambda record: "component" in record["extra"],
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _reset_default_logger():
    yield
    reset_default()
