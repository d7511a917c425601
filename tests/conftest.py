from pathlib import Path

import pytest


FILES_PATH = Path(__file__).parent / "files"


@pytest.fixture
def files_path():
    return FILES_PATH
