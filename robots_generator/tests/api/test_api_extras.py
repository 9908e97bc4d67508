import pytest
from rest_framework.exceptions import Throttled
from robots_generator.api_extras import (
    ApiAnonRateThrottle,
    add_retry_after_header_to_429_responses,
    format_wait,
)

# --- Tests for format_wait ---

@pytest.mark.parametrize("wait,expected", [
    (125, "2 minute(s) and 5 second(s)"),
    (45, "45 second(s)"),
    (60, "1 minute(s) and 0 second(s)"),
    (2.7, "2 second(s)"),
])
def test_format_wait(wait, expected):
    assert format_wait(wait) == expected

# --- Tests for ApiAnonRateThrottle ---

def test_throttle_failure_with_wait(monkeypatch):
    throttle = ApiAnonRateThrottle()
    monkeypatch.setattr(throttle, "wait", lambda: 125)
    with pytest.raises(Throttled) as excinfo:
        throttle.throttle_failure()
    assert "rate limit reached" in str(excinfo.value)
    assert "2 minute(s) and 5 second(s)" in str(excinfo.value)
    assert excinfo.value.wait == 125

def test_throttle_failure_without_wait(monkeypatch):
    throttle = ApiAnonRateThrottle()
    monkeypatch.setattr(throttle, "wait", lambda: None)
    with pytest.raises(Throttled) as excinfo:
        throttle.throttle_failure()
    assert "Please try again later" in str(excinfo.value)
    assert excinfo.value.wait is None

# --- Tests for add_retry_after_header_to_429_responses ---

def test_add_retry_after_header_to_429_responses():
    result = {
        "paths": {
            "/api/v1/generate/": {
                "get": {"responses": {"429": {"description": "Too Many Requests"}}},
                "post": {"responses": {"200": {"description": "OK"}}},
            }
        }
    }
    updated = add_retry_after_header_to_429_responses(result, None, None, None)
    operations = updated["paths"]["/api/v1/generate/"]
    assert "Retry-After" in operations["get"]["responses"]["429"]["headers"]
    assert "headers" not in operations["post"]["responses"]["200"]

def test_schema_contains_retry_after(client):
    from django.urls import reverse
    response = client.get(reverse("robots_generator:schema"))
    assert response.status_code == 200
    assert "Retry-After" in response.content.decode()
