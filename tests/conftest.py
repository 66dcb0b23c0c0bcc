import logging
import sys
from pathlib import Path

import pytest

# root projektu = katalog wyżej niż "tests"
root = Path(__file__).resolve().parents[1]
src = root / "src"

# dopnij src/ do sys.path (jeśli nie ma)
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # CLI callback podmienia handlery roota
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("PHISHCHECK_ENV", "PHISHCHECK_DEBUG", "LOG_LEVEL", "PHISHCHECK_LOG_JSON",
                 "PHISHCHECK_MAX_INPUT_CHARS", "PHISHCHECK_REASONS_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
