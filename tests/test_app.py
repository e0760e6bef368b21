def test_form_page_served(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Visitor Registration" in response.text
    assert 'data-api-url="/api/visitors"' in response.text
    assert "visitor_form.js" in response.text


def test_form_script_served(client):
    response = client.get("/static/visitor_form.js")

    assert response.status_code == 200
    assert "getUserMedia" in response.text


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_form_script_guards_pending_camera_request(client):
    script = client.get("/static/visitor_form.js").text

    # A start click is only honoured from idle, and idle is left before awaiting the prompt
    start = script.index("async function startCamera()")
    guard = script.index('if (photo.state !== "idle") return;', start)
    pending = script.index('photo.state = "requesting";', start)
    prompt = script.index("await navigator.mediaDevices.getUserMedia", start)
    assert guard < pending < prompt

    # A stream granted after the control moved on is stopped
    assert 'if (photo.state !== "requesting") {\n      stopStream(stream);' in script
    assert 'startButton.disabled = photo.state === "requesting";' in script
