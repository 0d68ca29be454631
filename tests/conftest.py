import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_vigil_logger():
    # init_logging rewires the "vigil" logger; keep tests independent
    logger = logging.getLogger("vigil")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for h in list(logger.handlers):
        if h not in handlers:
            logger.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in logger.handlers:
            logger.addHandler(h)
    logger.setLevel(level)
    logger.propagate = propagate
