import datetime
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest


@pytest.fixture
def noon() -> datetime.datetime:
    return datetime.datetime(2024, 5, 1, 12, 0, 0, tzinfo=datetime.timezone.utc)
