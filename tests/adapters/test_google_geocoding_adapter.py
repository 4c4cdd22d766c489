"""Tests for the Google Geocoding API adapter."""

from unittest.mock import MagicMock

import pytest
import requests

from google_helper.adapters.google import GoogleGeocoderAdapter
from google_helper.config import GoogleApiConfig
from google_helper.domain.models import AddressQuery


class TestGoogleGeocoderAdapter:
    """Test suite for GoogleGeocoderAdapter."""

    @pytest.fixture
    def session(self):
        session = MagicMock()
        session.get.return_value.status_code = 200
        session.get.return_value.json.return_value = {"results": [], "status": "OK"}
        return session

    @pytest.fixture
    def adapter(self, session):
        return GoogleGeocoderAdapter(session=session)

    def test_url_keeps_plus_separated_query(self, adapter, session):
        query = AddressQuery(fragments=("1600 Amphitheatre Pkwy", "Mountain View", "CA"))

        adapter.geocode("abc", query)

        session.get.assert_called_once_with(
            "https://maps.googleapis.com/maps/api/geocode/json"
            "?address=1600+Amphitheatre+Pkwy,+Mountain+View,+CA&key=abc"
        )

    def test_returns_decoded_body_untouched(self, adapter, session):
        body = {"results": [], "status": "OVER_QUERY_LIMIT", "error_message": "slow down"}
        session.get.return_value.json.return_value = body

        assert adapter.geocode("abc", AddressQuery(fragments=("x",))) is body

    def test_endpoint_is_configurable(self, session):
        adapter = GoogleGeocoderAdapter(
            config=GoogleApiConfig(geocode_url="http://localhost:8080/geocode"),
            session=session,
        )

        adapter.geocode("abc", AddressQuery(fragments=("x",)))

        assert session.get.call_args.args[0] == "http://localhost:8080/geocode?address=x&key=abc"

    def test_no_timeout_is_passed(self, adapter, session):
        adapter.geocode("abc", AddressQuery(fragments=("x",)))

        assert "timeout" not in session.get.call_args.kwargs

    def test_transport_error_propagates(self, adapter, session):
        session.get.side_effect = requests.Timeout("too slow")

        with pytest.raises(requests.Timeout):
            adapter.geocode("abc", AddressQuery(fragments=("x",)))

    def test_invalid_json_propagates(self, adapter, session):
        session.get.return_value.json.side_effect = requests.JSONDecodeError("bad", "", 0)

        with pytest.raises(requests.RequestException):
            adapter.geocode("abc", AddressQuery(fragments=("x",)))

    def test_non_object_body_is_returned_as_is(self, adapter, session):
        session.get.return_value.json.return_value = ["not", "an", "object"]

        assert adapter.geocode("abc", AddressQuery(fragments=("x",))) == ["not", "an", "object"]

    def test_close_closes_session(self, adapter, session):
        adapter.close()

        session.close.assert_called_once_with()
