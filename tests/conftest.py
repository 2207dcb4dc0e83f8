"""
Shared test fixtures.

Upstream HTTP is faked with FakeUpstream, which stands in for the
requests.Session used by DaaClient and answers by path.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from gops.cache import FlightDataCache
from gops.credentials import CredentialStore
from gops.ingestion import DaaClient, RefreshCycle
from gops.services import FlightDataService

BASE_URL = 'https://daa.test/v1'
CARRIERS = 'EI,BA'
PROBE_PATH = '/carrier/EI'
FLIGHTDATA_PATH = '/carrier/EI,BA'
UPDATES_PATH = '/updates/carrier/EI,BA'


def make_response(status_code=200, payload=None, text=None):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload) if payload is not None else ''
    response.text = text
    if payload is not None:
        response.json.return_value = payload
    else:
        response.json.side_effect = ValueError('Expecting value')
    return response


class FakeUpstream:
    """Path-routed stand-in for requests.Session."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def set(self, path, result):
        self.routes[path] = result

    def paths_called(self):
        return [url[len(BASE_URL):] for url, _, _ in self.calls]

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        result = self.routes.get(url[len(BASE_URL):], make_response(404, text='not found'))
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def store():
    return CredentialStore()


@pytest.fixture
def client(store, upstream):
    return DaaClient(store, base_url=BASE_URL, probe_carrier='EI', session=upstream)


@pytest.fixture
def cache():
    return FlightDataCache()


@pytest.fixture
def cycle(client, cache):
    return RefreshCycle(client, cache, carriers=CARRIERS)


@pytest.fixture
def service(store, client, cache, cycle):
    return FlightDataService(store, client, cache, cycle)
