import logging
from pathlib import Path

import pytest

from magicgram.utilities import logging as magicgram_logging


@pytest.fixture
def fresh_logger_name(request: pytest.FixtureRequest) -> str:
    name = f"magicgram.tests.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_get_logger_writes_to_configured_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fresh_logger_name: str
) -> None:
    monkeypatch.setenv("MAGICGRAM_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    logger = magicgram_logging.get_logger(fresh_logger_name)
    logger.debug("layout decided")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / f"{fresh_logger_name.replace('.', '_')}.log"
    assert logger.level == logging.DEBUG
    assert "layout decided" in log_file.read_text()


def test_get_logger_does_not_duplicate_handlers(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fresh_logger_name: str
) -> None:
    monkeypatch.setenv("MAGICGRAM_LOG_DIR", str(tmp_path))

    first = magicgram_logging.get_logger(fresh_logger_name)
    handler_count = len(first.handlers)
    second = magicgram_logging.get_logger(fresh_logger_name)

    assert first is second
    assert len(second.handlers) == handler_count == 2


def test_file_handler_can_be_disabled(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fresh_logger_name: str
) -> None:
    monkeypatch.setenv("MAGICGRAM_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("MAGICGRAM_LOG_TO_FILE", "false")

    logger = magicgram_logging.get_logger(fresh_logger_name)
    logger.warning("stream only")

    assert [type(handler) for handler in logger.handlers] == [logging.StreamHandler]
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("magicgram.text.layout", "magicgram_text_layout.log"),
        ("a..b", "a_b.log"),
        ("", "root.log"),
    ],
)
def test_log_filename_flattens_dotted_names(name: str, expected: str) -> None:
    assert magicgram_logging._log_filename(name) == expected
