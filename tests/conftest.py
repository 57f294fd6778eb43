"""Pytest configuration and fixtures for all tests."""

import json
import threading
import time

import pytest

from huecontrol.errors import TransportError
from huecontrol.services.light_controller import LightController

ADDRESS = "10.0.0.2"
CREDENTIAL = "secret-user"


def bridge_lights():
    """A /lights answer with three lights, in bridge order."""
    return {
        "kitchen": {"name": "Kitchen ceiling", "state": {"on": True, "bri": 12, "reachable": True}},
        "living": {"name": "Living room", "state": {"on": False, "bri": 200, "reachable": True}},
        "desk": {"name": "Desk lamp", "state": {"on": True, "reachable": False}},
    }


class FakeHttpClient:
    """Records every request instead of talking to a bridge.

    PUT bodies are decoded back to dicts so tests can compare them directly.
    """

    def __init__(self, lights=None, fail_on=(), delay=0.0):
        self.lights = bridge_lights() if lights is None else lights
        self.fail_on = set(fail_on)
        self.delay = delay
        self.gets = []
        self.closed = 0
        self.puts = []
        self._lock = threading.Lock()

    def close(self):
        self.closed += 1

    def get(self, url, *, timeout=None):
        self.gets.append(url)
        return self.lights

    def put(self, url, body, *, timeout=None):
        light = url.rstrip("/").split("/")[-2]
        if light in self.fail_on:
            raise TransportError(f"PUT {url} failed: boom", url)
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            self.puts.append((light, json.loads(body)))
        return [{"success": {}}]

    def bodies(self):
        return [body for _, body in self.puts]

    def targets(self):
        return [light for light, _ in self.puts]


@pytest.fixture
def client():
    return FakeHttpClient()


@pytest.fixture
def controller(client):
    """A connected controller with the start-up broadcasts already cleared."""
    controller = LightController(ADDRESS, CREDENTIAL, client=client)
    client.puts.clear()
    return controller


@pytest.fixture
def make_client():
    return FakeHttpClient


@pytest.fixture
def connect():
    """Builds a controller against the given fake client."""

    def _connect(client, **kwargs):
        return LightController.connect(ADDRESS, CREDENTIAL, client=client, **kwargs)

    return _connect
