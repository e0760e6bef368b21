#!/usr/bin/env python3
"""
Capture form
Holds the four visitor fields and submits them to the registration endpoint
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
import structlog

from visitor_checkin.core.config import settings
from visitor_checkin.form.camera import OpenCVCamera
from visitor_checkin.form.photo import PhotoCapture
from visitor_checkin.form.signature import SignaturePad

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = "Name and reason are required."
DEFAULT_SUCCESS = "Visitor Registered Successfully!"
DEFAULT_FAILURE = "Something went wrong."
TRANSPORT_FAILURE = "Server error. Please try again later."


@dataclass
class Notice:
    """Message shown to the visitor after a submit attempt"""
    kind: str  # "success" or "error"
    text: str


class CaptureForm:
    """Visitor check-in form state"""

    def __init__(
        self,
        api_url: Optional[str] = None,
        session=None,
        camera_factory: Callable[[], OpenCVCamera] = OpenCVCamera,
        timeout: Optional[float] = None,
    ):
        self.api_url = api_url or settings.API_URL
        self.session = session or requests.Session()
        self.timeout = timeout
        self.name = ""
        self.reason = ""
        self.photo = PhotoCapture(camera_factory)
        self.signature = SignaturePad()
        self.notice: Optional[Notice] = None

    def payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "reason": self.reason,
            "photo": self.photo.photo,
            "signature": self.signature.signature,
        }

    def reset(self):
        self.name = ""
        self.reason = ""
        self.photo.reset()
        self.signature.clear()

    def submit(self) -> bool:
        """
        Send the current values to the registration endpoint

        Returns:
            True when the visitor was registered. On failure the field
            values are left untouched so the visitor can retry.
        """
        if not self.name or not self.reason:
            self.notice = Notice("error", REQUIRED_FIELDS)
            return False

        try:
            response = self.session.post(self.api_url, json=self.payload(), timeout=self.timeout)
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Visitor submission failed", url=self.api_url, err=str(e))
            self.notice = Notice("error", TRANSPORT_FAILURE)
            return False

        message = data.get("message") if isinstance(data, dict) else None

        if 200 <= response.status_code < 300:
            logger.info("Visitor submitted", status_code=response.status_code)
            self.notice = Notice("success", message or DEFAULT_SUCCESS)
            self.reset()
            return True

        logger.warning("Visitor submission rejected", status_code=response.status_code, detail=message)
        self.notice = Notice("error", message or DEFAULT_FAILURE)
        return False
