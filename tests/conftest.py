from datetime import datetime

import pytest


@pytest.fixture
def origin():
    return datetime(1990, 1, 1, 12, 0)
