import sys

import pytest
from loguru import logger

from santa_draw.core.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_uses_shared_format(tmp_path):
    log_path = tmp_path / "santa.log"
    setup_logging("WARNING", str(log_path))

    logger.debug("drawing for {count} people", count=3)
    logger.remove()

    content = log_path.read_text()
    assert "| DEBUG | test_logging:test_file_sink_uses_shared_format:" in content
    assert "drawing for 3 people" in content


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
