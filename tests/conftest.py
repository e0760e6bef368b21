import asyncio

import numpy as np
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from visitor_checkin.api.endpoints.visitors import get_visitor_store
from visitor_checkin.core.exceptions import CameraUnavailableError
from visitor_checkin.main import app
from visitor_checkin.services.visitor_store import VisitorStore


def stored_visitors(collection):
    """Everything currently in the visitors collection"""
    return asyncio.run(collection.find({}).to_list(None))


class FakeCamera:
    """Stands in for OpenCVCamera"""

    def __init__(self, frames=None, deny=False):
        self.frames = list(frames) if frames is not None else [np.zeros((480, 640, 3), dtype=np.uint8)]
        self.deny = deny
        self.opened = False
        self.released = 0

    def open(self):
        if self.deny:
            raise CameraUnavailableError(details="permission denied")
        self.opened = True

    def read_frame(self):
        if not self.opened:
            raise CameraUnavailableError(details="camera is not open")
        return self.frames.pop(0) if self.frames else None

    def release(self):
        self.opened = False
        self.released += 1


@pytest.fixture
def collection():
    return AsyncMongoMockClient()["visitor_checkin_test"]["visitors"]


@pytest.fixture
def client(collection):
    app.dependency_overrides[get_visitor_store] = lambda: VisitorStore(collection)
    yield TestClient(app)
    app.dependency_overrides.clear()
