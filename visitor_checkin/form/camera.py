#!/usr/bin/env python3
"""
Camera access for photo capture
"""

import base64
from typing import Optional

import cv2
import numpy as np
import structlog

from visitor_checkin.core.exceptions import CameraUnavailableError

logger = structlog.get_logger(__name__)

FRAME_WIDTH = 640
FRAME_HEIGHT = 480
JPEG_QUALITY = 92


def frame_to_data_url(frame: np.ndarray, quality: int = JPEG_QUALITY) -> str:
    """Encode a BGR frame as a base64 JPEG data URL"""
    try:
        ok, buffer = cv2.imencode(".jpg", frame, [int(cv2.IMWRITE_JPEG_QUALITY), quality])
    except cv2.error as e:
        raise ValueError(f"Frame could not be encoded as JPEG: {e}") from e
    if not ok:
        raise ValueError("Frame could not be encoded as JPEG")
    return "data:image/jpeg;base64," + base64.b64encode(buffer.tobytes()).decode("ascii")


class OpenCVCamera:
    """Webcam accessed through cv2.VideoCapture"""

    def __init__(self, device_index: int = 0, width: int = FRAME_WIDTH, height: int = FRAME_HEIGHT):
        self.device_index = device_index
        self.width = width
        self.height = height
        self.capture: Optional[cv2.VideoCapture] = None

    def open(self):
        """Acquire the device; raises CameraUnavailableError when it cannot be opened"""
        capture = cv2.VideoCapture(self.device_index)
        if not capture.isOpened():
            capture.release()
            raise CameraUnavailableError(details=f"device {self.device_index}")
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        self.capture = capture
        logger.info("Camera opened", device=self.device_index)

    def read_frame(self) -> Optional[np.ndarray]:
        """Current frame, or None when the device returned nothing"""
        if self.capture is None:
            raise CameraUnavailableError(details="camera is not open")
        ok, frame = self.capture.read()
        if not ok:
            return None
        return frame

    def release(self):
        if self.capture is not None:
            self.capture.release()
            self.capture = None
            logger.info("Camera released", device=self.device_index)
