import os
import tempfile

import pytest

# Settings are read at import time, so point them somewhere disposable first.
_TMP_ROOT = tempfile.mkdtemp(prefix="listings-tests-")
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_ROOT, "uploads")
os.environ["PROPERTIES_FILE"] = os.path.join(_TMP_ROOT, "properties.json")

from fastapi.testclient import TestClient  # noqa: E402

from database import PropertyStore, get_property_store  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
def upload_dir():
    return os.environ["UPLOAD_DIR"]


@pytest.fixture
def store(tmp_path):
    return PropertyStore(str(tmp_path / "properties.json")).load()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_property_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
