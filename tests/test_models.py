"""Tests for the request value objects."""

import dataclasses

import pytest

from google_helper.domain.errors import ConfigurationError, InvalidParametersError
from google_helper.domain.models import AddressQuery, StaticMapRequest


def test_address_query_rejects_empty_fragments():
    with pytest.raises(InvalidParametersError) as exc_info:
        AddressQuery(fragments=())

    assert isinstance(exc_info.value, ConfigurationError)
    assert exc_info.value.setting_name == "params"


def test_address_query_wraps_a_single_string():
    assert AddressQuery.from_params("Mountain View").fragments == ("Mountain View",)


def test_address_query_is_immutable():
    query = AddressQuery(fragments=("a",))
    with pytest.raises(dataclasses.FrozenInstanceError):
        query.fragments = ("b",)  # type: ignore[misc]


def test_static_map_request_defaults():
    request = StaticMapRequest(address="Berlin", width=100, height=50)

    assert request.size == "100x50"
    assert request.markers == "color:red|Berlin"
    assert request.to_params("k") == {
        "zoom": "13",
        "size": "100x50",
        "maptype": "roadmap",
        "format": "jpg",
        "markers": "color:red|Berlin",
        "key": "k",
    }


@pytest.mark.parametrize("params", [None, "", [], {}])
def test_from_params_rejects_empty_input(params):
    with pytest.raises(InvalidParametersError):
        AddressQuery.from_params(params)


def test_from_params_uses_mapping_values():
    query = AddressQuery.from_params({"street": "Main St 1", "zip": "12345"})

    assert query.fragments == ("Main St 1", "12345")
