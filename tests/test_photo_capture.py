import numpy as np

from conftest import FakeCamera
from visitor_checkin.form.photo import CAPTURE_FAILED, PhotoCapture, PhotoState


def test_start_goes_live_and_opens_camera():
    camera = FakeCamera()
    photo = PhotoCapture(lambda: camera)

    photo.start()

    assert photo.state is PhotoState.LIVE
    assert photo.is_live
    assert camera.opened


def test_capture_holds_photo_and_releases_camera():
    camera = FakeCamera(frames=[np.full((480, 640, 3), 128, dtype=np.uint8)])
    photo = PhotoCapture(lambda: camera)
    photo.start()

    photo.capture()

    assert photo.state is PhotoState.CAPTURED
    assert not photo.is_live
    assert photo.photo.startswith("data:image/jpeg;base64,")
    assert not camera.opened
    assert photo.error == ""


def test_retake_discards_photo():
    photo = PhotoCapture(FakeCamera)
    photo.start()
    photo.capture()

    photo.retake()

    assert photo.state is PhotoState.IDLE
    assert photo.photo == ""


def test_cancel_returns_to_idle_and_releases_camera():
    camera = FakeCamera()
    photo = PhotoCapture(lambda: camera)
    photo.start()

    photo.cancel()

    assert photo.state is PhotoState.IDLE
    assert camera.released == 1
    assert photo.photo == ""


def test_denied_camera_reports_error_and_stays_idle():
    photo = PhotoCapture(lambda: FakeCamera(deny=True))

    photo.start()

    assert photo.state is PhotoState.IDLE
    assert photo.error == "Camera access was denied or is unavailable."
    assert photo.camera is None


def test_empty_frame_keeps_camera_live():
    camera = FakeCamera(frames=[])
    photo = PhotoCapture(lambda: camera)
    photo.start()

    photo.capture()

    assert photo.state is PhotoState.LIVE
    assert photo.error == CAPTURE_FAILED
    assert camera.opened


def test_retry_after_denied_camera():
    cameras = [FakeCamera(deny=True), FakeCamera()]
    photo = PhotoCapture(lambda: cameras.pop(0))

    photo.start()
    photo.start()

    assert photo.state is PhotoState.LIVE
    assert photo.error == ""


def test_invalid_transitions_are_ignored():
    photo = PhotoCapture(FakeCamera)

    photo.capture()
    photo.retake()
    photo.cancel()

    assert photo.state is PhotoState.IDLE
    assert photo.photo == ""


def test_unencodable_frame_keeps_camera_live():
    camera = FakeCamera(frames=[np.zeros((0, 0, 3), dtype=np.uint8)])
    photo = PhotoCapture(lambda: camera)
    photo.start()

    photo.capture()

    assert photo.state is PhotoState.LIVE
    assert photo.error == CAPTURE_FAILED
    assert photo.photo == ""
    assert camera.opened


def test_encoding_error_is_reported_not_raised(monkeypatch):
    def fail_encoding(frame):
        raise ValueError("Frame could not be encoded as JPEG")

    monkeypatch.setattr("visitor_checkin.form.photo.frame_to_data_url", fail_encoding)
    photo = PhotoCapture(FakeCamera)
    photo.start()

    photo.capture()

    assert photo.is_live
    assert photo.error == CAPTURE_FAILED
