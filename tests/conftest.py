import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    # Keep the default filesystem strategy out of the real user data dir
    data_dir = tmp_path / "user_data"
    monkeypatch.setenv("IDEATOGAME_DATA_DIR", str(data_dir))
    return data_dir
