import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_sessionstart(session):
    import icaomrz

    location = pathlib.Path(icaomrz.__file__).resolve()
    if ROOT not in location.parents:
        raise RuntimeError(f"Tests must run against the checkout, got icaomrz from {location}")


@pytest.fixture
def write_file(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolate_log_level(monkeypatch):
    monkeypatch.delenv("ICAOMRZ_LOG_LEVEL", raising=False)
