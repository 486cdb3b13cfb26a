import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by inputkit.log.setup_logging() between tests."""
    yield

    log = logging.getLogger('inputkit')
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.setLevel(logging.NOTSET)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir so ~/.config/inputkit is never the real one."""
    monkeypatch.setenv('HOME', str(tmp_path))
    return tmp_path
