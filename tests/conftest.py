"""Shared test fixtures and configuration."""

import io
import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from textconverter.config import reload_settings
from textconverter.main import app


class UnclosableBytesIO(io.BytesIO):
    """BytesIO that records close() calls and keeps its buffer readable."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.close_calls = 0

    def close(self):
        self.close_calls += 1


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test against settings built from a clean environment."""
    with patch.dict(os.environ, {}, clear=False):
        for name in list(os.environ):
            if name.startswith(("CONVERTER_", "CONTENT_")):
                del os.environ[name]
        reload_settings()
        yield
    reload_settings()


@pytest.fixture
def api_client():
    """Fixture to provide FastAPI test client with the app lifespan running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def env_small_content_limit():
    """Fixture limiting conversion requests to 64 bytes."""
    with patch.dict(os.environ, {"CONTENT_MAX_CONTENT_SIZE": "64"}):
        reload_settings()
        yield
    reload_settings()


@pytest.fixture
def byte_source():
    """Factory for readable byte streams that record close() calls."""
    return lambda data: UnclosableBytesIO(data)


@pytest.fixture
def byte_sink():
    """Writable byte stream that records close() calls."""
    return UnclosableBytesIO()


@pytest.fixture
def quoted_text():
    """Plain text with six levels of quoting."""
    return (
        "> Thou art a villainous ill-breeding spongy dizzy-eyed reeky elf-skinned pigeon-egg!\n"
        ">> Thou artless swag-bellied milk-livered dismal-dreaming idle-headed scut!\n"
        ">>> Thou errant folly-fallen spleeny reeling-ripe unmuzzled ratsbane!\n"
        ">>>> Henceforth, the coding style is to be strictly enforced, including the use of only upper case.\n"
        ">>>>> I've noticed a lack of adherence to the coding styles, of late.\n"
        ">>>>>> Any complaints?\n"
    )


@pytest.fixture
def quoted_flowed():
    """``quoted_text`` encoded as format=flowed with a 76 character limit."""
    return (
        "> Thou art a villainous ill-breeding spongy dizzy-eyed reeky elf-skinned \n"
        ">  pigeon-egg!\n"
        ">> Thou artless swag-bellied milk-livered dismal-dreaming idle-headed scut!\n"
        ">>> Thou errant folly-fallen spleeny reeling-ripe unmuzzled ratsbane!\n"
        ">>>> Henceforth, the coding style is to be strictly enforced, including \n"
        ">>>>  the use of only upper case.\n"
        ">>>>> I've noticed a lack of adherence to the coding styles, of late.\n"
        ">>>>>> Any complaints?\n"
    )
