"""Shared fixtures: small settings and a hand-built galaxy."""

import pytest

from helpers import make_galaxy, make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def galaxy(settings):
    return make_galaxy(settings)
