from status_api.core.exceptions import (
    ConfigurationError,
    StatusError,
    StatusUnavailableError,
    UpstreamError,
    utc_now_iso,
)


def test_status_error_to_dict():
    err = StatusError(error="Something broke", message="details here", status=502)
    assert err.to_dict() == {"error": "Something broke", "message": "details here"}
    assert err.status == 502


def test_status_error_without_message():
    err = StatusError(error="Only error")
    assert err.to_dict() == {"error": "Only error"}
    assert str(err) == "Only error"


def test_upstream_error_defaults():
    err = UpstreamError("Wormly API returned error code: 5")
    assert err.status == 500
    assert err.to_dict()["error"] == "Failed to fetch Wormly data"
    assert str(err) == "Wormly API returned error code: 5"


def test_configuration_error_defaults():
    err = ConfigurationError()
    assert err.status == 500
    assert err.to_dict() == {"error": "WORMLY_API_KEY not configured"}


def test_status_unavailable_error_has_timestamp():
    err = StatusUnavailableError("boom")
    d = err.to_dict()
    assert d["error"] == "Failed to fetch status data"
    assert d["message"] == "boom"
    assert d["timestamp"].endswith("Z")


def test_utc_now_iso_format():
    stamp = utc_now_iso()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2024-01-01T00:00:00.000Z")
