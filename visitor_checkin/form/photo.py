#!/usr/bin/env python3
"""
Photo capture control

Idle -> Live on start(), Live -> Captured on capture(), Live -> Idle on
cancel() or camera failure, Captured -> Idle on retake(). The camera is held
only while Live.
"""

from enum import Enum
from typing import Callable

import structlog

from visitor_checkin.core.exceptions import CameraUnavailableError
from visitor_checkin.form.camera import OpenCVCamera, frame_to_data_url

logger = structlog.get_logger(__name__)

CAPTURE_FAILED = "Could not capture photo. Please try again."


class PhotoState(str, Enum):
    IDLE = "idle"
    LIVE = "live"
    CAPTURED = "captured"


class PhotoCapture:
    """Three-state webcam snapshot control"""

    def __init__(self, camera_factory: Callable[[], OpenCVCamera] = OpenCVCamera):
        self.camera_factory = camera_factory
        self.camera = None
        self.state = PhotoState.IDLE
        self.photo = ""
        self.error = ""

    @property
    def is_live(self) -> bool:
        return self.state is PhotoState.LIVE

    def start(self):
        if self.state is not PhotoState.IDLE:
            return
        camera = self.camera_factory()
        try:
            camera.open()
        except CameraUnavailableError as e:
            self._camera_failed(e, camera)
            return
        self.camera = camera
        self.state = PhotoState.LIVE
        self.error = ""

    def capture(self):
        if self.state is not PhotoState.LIVE:
            return
        try:
            frame = self.camera.read_frame()
        except CameraUnavailableError as e:
            self._camera_failed(e, self.camera)
            return

        if frame is None:
            self.error = CAPTURE_FAILED
            return

        try:
            photo = frame_to_data_url(frame)
        except ValueError as e:
            logger.warning("Photo encoding failed", err=str(e))
            self.error = CAPTURE_FAILED
            return

        self.photo = photo
        self._release()
        self.state = PhotoState.CAPTURED
        self.error = ""
        logger.info("Photo captured")

    def cancel(self):
        if self.state is not PhotoState.LIVE:
            return
        self._release()
        self.state = PhotoState.IDLE
        self.error = ""

    def retake(self):
        if self.state is not PhotoState.CAPTURED:
            return
        self.photo = ""
        self.state = PhotoState.IDLE

    def reset(self):
        self._release()
        self.state = PhotoState.IDLE
        self.photo = ""
        self.error = ""

    def _camera_failed(self, error: CameraUnavailableError, camera):
        logger.warning("Webcam error", err=str(error))
        camera.release()
        self.camera = None
        self.state = PhotoState.IDLE
        self.error = error.message

    def _release(self):
        if self.camera is not None:
            self.camera.release()
            self.camera = None
