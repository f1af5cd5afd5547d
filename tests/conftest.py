import pytest

from congressgov_client.endpoints import CongressEndpointsMixin


class RecordingClient(CongressEndpointsMixin):
    """Endpoint surface with the transport replaced by a call log."""

    def __init__(self):
        self.calls = []

    def _request(self, path, params=None):
        self.calls.append((path, params or {}))
        return {"path": path}

    @property
    def last_path(self):
        return self.calls[-1][0]

    @property
    def last_raw_params(self):
        return self.calls[-1][1]

    @property
    def last_params(self):
        """Parameters that would reach the query string (None dropped)."""
        return {k: v for k, v in self.calls[-1][1].items() if v is not None}


@pytest.fixture
def recorder():
    return RecordingClient()


@pytest.fixture
def client(monkeypatch):
    from congressgov_client import CongressAPIClient

    monkeypatch.setenv("CONGRESS_API_KEY", "test_key")
    return CongressAPIClient()
