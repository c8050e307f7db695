"""Shared fixtures for Country Service tests."""

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.resolver.libphone_parser import LibPhoneParser
from src.utils.config_loader import ServiceSettings


@pytest.fixture
def settings() -> ServiceSettings:
    return ServiceSettings()


@pytest.fixture
def parser() -> LibPhoneParser:
    return LibPhoneParser()


@pytest.fixture
def client(settings, parser) -> TestClient:
    return TestClient(create_app(settings=settings, parser=parser))
