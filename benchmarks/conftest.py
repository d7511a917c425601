import gc

import pytest


@pytest.fixture(autouse=True)
def _collect_garbage():
    gc.collect()
    gc.collect()
