import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def log_records():
    """Captures lzd log records emitted during a test."""
    from lzd.logging import logger

    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level = 'DEBUG', format = '{message}')
    yield records
    logger.remove(handler_id)
