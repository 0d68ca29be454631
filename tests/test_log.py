import logging
from pathlib import Path

from vigil.logging.log import init_logging


def test_init_logging_without_dir_has_no_file():
    logger, run_id, log_path = init_logging()
    assert log_path is None
    assert run_id
    assert logger.name == "vigil"
    assert logger.propagate is False
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    assert logger.handlers[0].level == logging.WARNING


def test_init_logging_with_dir_writes_trace(tmp_path: Path):
    logger, run_id, log_path = init_logging(base_dir=tmp_path / "logs", verbose=True)
    logger.debug("hello trace")
    for h in logger.handlers:
        h.flush()

    assert log_path.parent == tmp_path / "logs"
    assert run_id in log_path.name
    text = log_path.read_text()
    assert "hello trace" in text
    assert f"run_id={run_id}" in text
    assert logger.handlers[0].level == logging.DEBUG


def test_init_logging_replaces_previous_handlers(tmp_path: Path):
    init_logging(base_dir=tmp_path)
    logger, _, _ = init_logging()
    assert len(logger.handlers) == 1
