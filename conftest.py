import sys
from pathlib import Path

import pytest

# Keeps 'src' importable when the package has not been installed in editable mode.

if sys.version_info < (3, 10):
    print(
        f"ERROR: This project requires Python 3.10+ (found {sys.version.split()[0]}).",
        file=sys.stderr,
    )
    sys.exit(1)


ROOT_DIR = Path(__file__).parent.absolute()
src_dir = ROOT_DIR / "src"

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _clear_graph_env(monkeypatch):
    """Start every test from default graph settings.

    Tests that exercise env-driven settings set the variables explicitly.
    """
    monkeypatch.delenv("FORCE_GRAPH_LOG_OVERWRITES", raising=False)
    monkeypatch.delenv("FORCE_GRAPH_WARN_AMBIGUOUS_IDS", raising=False)
