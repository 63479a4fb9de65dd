"""
Tests for the WAQI feed normalizer and client.

Tests cover:
- Success payloads: pollutant mapping, defaults, timestamps
- Failure payloads: provider message pass-through, fallback message, invalid key
- Malformed payloads: rejected with a typed error
- Fetching: missing token, request shape, transport failures
"""

from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest
import requests

from frontend.errors import (
    DataError,
    InvalidCredential,
    MalformedPayload,
    MissingCredential,
    NetworkFailure,
    ProviderError,
)
from frontend.models import Location
from frontend.waqi_api import (
    FeedFailure,
    FeedSuccess,
    decode_feed_payload,
    fetch_air_quality,
    normalize_reading,
)

NOW = datetime(2025, 6, 1, 12, 30, tzinfo=timezone.utc)


class TestDecodeFeedPayload:
    """Test suite for decode_feed_payload."""

    def test_ok_status_decodes_success(self, ok_payload):
        feed = decode_feed_payload(ok_payload)
        assert isinstance(feed, FeedSuccess)
        assert feed.data.aqi == 42
        assert feed.data.pollutant("pm25") == 5
        assert feed.data.pollutant("o3") == 0

    def test_error_status_decodes_failure(self):
        feed = decode_feed_payload({"status": "error", "data": "Unknown station"})
        assert isinstance(feed, FeedFailure)
        assert feed.message == "Unknown station"

    def test_not_an_object(self):
        with pytest.raises(MalformedPayload):
            decode_feed_payload(["ok"])


class TestNormalizeReading:
    """Test suite for normalize_reading."""

    # ==================== Success Payloads ====================

    def test_round_trip_example(self, ok_payload):
        """A minimal success payload maps onto a Reading with zero defaults."""
        reading = normalize_reading(ok_payload)
        assert reading.index == 42
        assert reading.particulate2_5 == 5
        assert reading.particulate10 == 0
        assert reading.nitrogen_dioxide == 0
        assert reading.ozone == 0
        assert reading.carbon_monoxide == 0
        assert reading.observed_at == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_all_pollutants_mapped(self):
        payload = {
            "status": "ok",
            "data": {
                "aqi": 87,
                "iaqi": {
                    "pm25": {"v": 87},
                    "pm10": {"v": 40},
                    "no2": {"v": 12.5},
                    "o3": {"v": 30},
                    "co": {"v": 3.1},
                    "t": {"v": 21},
                },
                "time": {"iso": "2024-03-05T08:00:00+01:00"},
            },
        }
        reading = normalize_reading(payload)
        assert reading.particulate2_5 == 87
        assert reading.particulate10 == 40
        assert reading.nitrogen_dioxide == 12.5
        assert reading.ozone == 30
        assert reading.carbon_monoxide == 3.1
        assert reading.observed_at == datetime(2024, 3, 5, 7, 0, tzinfo=timezone.utc)

    def test_missing_iaqi_defaults_to_zero(self):
        reading = normalize_reading({"status": "ok", "data": {"aqi": 10}}, now=NOW)
        assert reading.index == 10
        assert reading.particulate2_5 == 0
        assert reading.carbon_monoxide == 0

    def test_missing_time_uses_now(self):
        reading = normalize_reading({"status": "ok", "data": {"aqi": 10, "iaqi": {}}}, now=NOW)
        assert reading.observed_at == NOW

    def test_blank_iso_uses_now(self):
        payload = {"status": "ok", "data": {"aqi": 10, "iaqi": {}, "time": {"iso": ""}}}
        assert normalize_reading(payload, now=NOW).observed_at == NOW

    def test_missing_time_defaults_to_wall_clock(self):
        before = datetime.now(timezone.utc)
        reading = normalize_reading({"status": "ok", "data": {"aqi": 10}})
        assert before <= reading.observed_at <= datetime.now(timezone.utc)

    # ==================== Failure Payloads ====================

    def test_invalid_key_message_passed_through(self):
        with pytest.raises(ProviderError) as exc_info:
            normalize_reading({"status": "error", "data": "Invalid key"})
        assert exc_info.value.message == "Invalid key"
        assert isinstance(exc_info.value, InvalidCredential)

    def test_other_provider_message(self):
        with pytest.raises(ProviderError) as exc_info:
            normalize_reading({"status": "error", "data": "Over quota"})
        assert exc_info.value.message == "Over quota"
        assert not isinstance(exc_info.value, InvalidCredential)

    def test_unknown_status_is_provider_error(self):
        with pytest.raises(ProviderError) as exc_info:
            normalize_reading({"status": "nope", "data": "Something odd"})
        assert exc_info.value.message == "Something odd"

    def test_failure_without_message_uses_fallback(self):
        with pytest.raises(ProviderError) as exc_info:
            normalize_reading({"status": "error", "data": {}})
        assert exc_info.value.message == "Failed to fetch air quality data"

    def test_failure_without_status(self):
        with pytest.raises(ProviderError):
            normalize_reading({})

    # ==================== Malformed Payloads ====================

    def test_non_numeric_aqi(self):
        """WAQI reports "-" when a station has no index."""
        with pytest.raises(MalformedPayload):
            normalize_reading({"status": "ok", "data": {"aqi": "-", "iaqi": {}}})

    def test_ok_status_with_string_data(self):
        with pytest.raises(MalformedPayload):
            normalize_reading({"status": "ok", "data": "Unknown station"})

    def test_negative_aqi(self):
        with pytest.raises(MalformedPayload):
            normalize_reading({"status": "ok", "data": {"aqi": -3}})

    def test_negative_pollutant(self):
        """A negative sub-index is rejected as malformed, not left to fail on Reading."""
        with pytest.raises(MalformedPayload):
            normalize_reading({"status": "ok", "data": {"aqi": 12, "iaqi": {"pm25": {"v": -1}}}})

    def test_errors_share_base(self):
        with pytest.raises(DataError):
            normalize_reading({"status": "ok", "data": {}})


class TestFetchAirQuality:
    """Test suite for fetch_air_quality."""

    @pytest.fixture
    def location(self):
        return Location(latitude=52.2297, longitude=21.0122)

    def _response(self, payload):
        response = Mock()
        response.raise_for_status = Mock()
        response.json = Mock(return_value=payload)
        return response

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token(self, location, token):
        with patch("frontend.waqi_api.requests.get") as mock_get:
            with pytest.raises(MissingCredential) as exc_info:
                fetch_air_quality(location, token)
        mock_get.assert_not_called()
        assert exc_info.value.message == "Please enter your WAQI API token first"

    def test_success(self, location, ok_payload):
        with patch("frontend.waqi_api.requests.get", return_value=self._response(ok_payload)) as mock_get:
            reading = fetch_air_quality(location, " secret ")

        assert reading.index == 42
        url = mock_get.call_args.args[0]
        assert url.endswith("/feed/geo:52.2297;21.0122/")
        assert mock_get.call_args.kwargs["params"] == {"token": "secret"}
        assert mock_get.call_args.kwargs["timeout"] > 0

    def test_provider_error_propagates(self, location):
        payload = {"status": "error", "data": "Invalid key"}
        with patch("frontend.waqi_api.requests.get", return_value=self._response(payload)):
            with pytest.raises(InvalidCredential):
                fetch_air_quality(location, "bad")

    def test_connection_error(self, location):
        with patch("frontend.waqi_api.requests.get", side_effect=requests.ConnectionError("boom")):
            with pytest.raises(NetworkFailure) as exc_info:
                fetch_air_quality(location, "secret")
        assert "boom" in exc_info.value.message

    def test_http_error(self, location):
        response = self._response({})
        response.raise_for_status.side_effect = requests.HTTPError("502 Server Error")
        with patch("frontend.waqi_api.requests.get", return_value=response):
            with pytest.raises(NetworkFailure):
                fetch_air_quality(location, "secret")
