import pytest
from fastapi.testclient import TestClient

from shorturl.main import app
from shorturl.services.codec import get_codec
from shorturl.utils.encoding import Codec


@pytest.fixture
def codec():
    """Codec with the default alphabet and no offset."""
    return Codec()


@pytest.fixture
def shuffled_codec():
    return Codec(use_shuffled_alphabet=True)


@pytest.fixture
def api_codec():
    """Codec served by the API; tests may reconfigure it before calling the client."""
    return Codec()


@pytest.fixture
def client(api_codec):
    """Creates a test client with the codec dependency overridden."""
    app.dependency_overrides[get_codec] = lambda: api_codec
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_ids():
    """Provides sample integer keys for testing."""
    return [0, 1, 60, 61, 62, 3720, 3721, 10000, 123456, 2**31 - 1, 2**63, 10**40]
