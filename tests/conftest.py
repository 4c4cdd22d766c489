"""Shared fixtures: fresh configuration and adapters for every test."""

import pytest

from google_helper import Address
from google_helper.config import reset_config


@pytest.fixture(autouse=True)
def isolated_helper():
    reset_config()
    Address.geocoder = None
    Address.map_images = None
    yield
    reset_config()
    Address.geocoder = None
    Address.map_images = None
