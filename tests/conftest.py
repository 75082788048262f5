import logging

import pytest


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_avgstars", False):
            root.removeHandler(h)


@pytest.fixture()
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("AVGSTARS_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture()
def write_ratings(workdir):
    def _write(text: str, name: str = "ratings.txt"):
        p = workdir / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
