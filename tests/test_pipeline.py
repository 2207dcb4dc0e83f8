"""Tests for the refresh cycle and the background scheduler."""

import threading
from unittest.mock import MagicMock

import requests

from gops.ingestion import RefreshCycle, RefreshScheduler
from tests.conftest import FLIGHTDATA_PATH, UPDATES_PATH, make_response


class TestRefreshCycle:
    def test_fetches_both_resources(self, cycle, cache, store, upstream):
        store.set('idABC', 'keyXYZ')
        upstream.set(FLIGHTDATA_PATH, make_response(200, {'flights': [1]}))
        upstream.set(UPDATES_PATH, make_response(200, {'updates': [2]}))

        cycle.run()

        assert upstream.paths_called() == [FLIGHTDATA_PATH, UPDATES_PATH]
        assert cache.read_flightdata() == {'flights': [1]}
        assert cache.read_updates() == {'updates': [2]}
        assert cache.snapshot().last_refreshed_at is not None
        assert cycle.stats['cycle_count'] == 1
        assert cycle.stats['error_count'] == 0

    def test_primary_failure_does_not_block_secondary(self, cycle, cache, store, upstream):
        store.set('idABC', 'keyXYZ')
        upstream.set(FLIGHTDATA_PATH, make_response(200, {'flights': [1]}))
        upstream.set(UPDATES_PATH, make_response(200, {'updates': ['old']}))
        cycle.run()

        upstream.set(FLIGHTDATA_PATH, requests.exceptions.Timeout('slow'))
        upstream.set(UPDATES_PATH, make_response(200, {'updates': ['new']}))
        cycle.run()

        assert cache.read_flightdata() == {'flights': [1]}
        assert cache.read_updates() == {'updates': ['new']}
        assert cycle.stats['error_count'] == 1

    def test_no_credentials_is_absorbed(self, cycle, cache, upstream):
        cycle.run()

        assert upstream.calls == []
        assert cache.snapshot().last_refreshed_at is None
        assert cycle.stats['cycle_count'] == 1
        assert cycle.stats['error_count'] == 1

    def test_upstream_errors_are_absorbed(self, cycle, cache, store, upstream):
        store.set('idABC', 'bad')
        upstream.set(FLIGHTDATA_PATH, make_response(401, text='denied'))
        upstream.set(UPDATES_PATH, make_response(401, text='denied'))

        cycle.run()

        assert cache.read_flightdata() is None
        assert cache.read_updates() is None

    def test_null_document_never_reads_as_missing(self, cycle, cache, store, upstream):
        store.set('idABC', 'keyXYZ')
        upstream.set(FLIGHTDATA_PATH, make_response(200, {'flights': [1]}))
        upstream.set(UPDATES_PATH, make_response(200, {'updates': [1]}))
        cycle.run()

        null_response = make_response(200, text='null')
        null_response.json.side_effect = None
        null_response.json.return_value = None
        upstream.set(FLIGHTDATA_PATH, null_response)
        upstream.set(UPDATES_PATH, make_response(200, {'updates': [2]}))
        cycle.run()

        assert cache.read_flightdata() == {}
        assert cache.read_updates() == {'updates': [2]}


class TestRefreshScheduler:
    def test_runs_immediately_on_start(self):
        ran = threading.Event()
        cycle = MagicMock(spec=RefreshCycle)
        cycle.run.side_effect = ran.set

        scheduler = RefreshScheduler(cycle, interval=60)
        scheduler.start_background()
        try:
            assert ran.wait(2)
            assert scheduler.running
        finally:
            scheduler.stop()

        assert not scheduler.running
        assert cycle.run.call_count == 1

    def test_ticks_repeatedly(self):
        three = threading.Event()
        cycle = MagicMock(spec=RefreshCycle)

        def run():
            if cycle.run.call_count >= 3:
                three.set()

        cycle.run.side_effect = run

        scheduler = RefreshScheduler(cycle, interval=0.01)
        scheduler.start_background()
        try:
            assert three.wait(2)
        finally:
            scheduler.stop()

        assert scheduler.stats['tick_count'] >= 3

    def test_survives_cycle_crash(self):
        recovered = threading.Event()
        cycle = MagicMock(spec=RefreshCycle)

        def run():
            if cycle.run.call_count > 1:
                recovered.set()

        scheduler = RefreshScheduler(cycle, interval=0.01)
        cycle.run.side_effect = _raise_first(run)
        scheduler.start_background()
        try:
            assert recovered.wait(2)
        finally:
            scheduler.stop()

        assert cycle.run.call_count >= 2

    def test_second_start_is_noop(self):
        cycle = MagicMock(spec=RefreshCycle)
        scheduler = RefreshScheduler(cycle, interval=60)
        scheduler.start_background()
        try:
            thread = scheduler._thread
            scheduler.start_background()
            assert scheduler._thread is thread
        finally:
            scheduler.stop()

    def test_stats(self):
        scheduler = RefreshScheduler(MagicMock(spec=RefreshCycle), interval=42)
        assert scheduler.stats == {'running': False, 'interval_seconds': 42, 'tick_count': 0}


def _raise_first(then):
    calls = []

    def side_effect():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError('boom')
        then()

    return side_effect
