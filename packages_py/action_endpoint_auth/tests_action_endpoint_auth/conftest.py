"""
Pytest configuration and shared fixtures for action_endpoint_auth tests.
"""
import logging
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from action_endpoint_auth.settings import get_settings


# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def basic_properties() -> Dict[str, Any]:
    return {"username": "admin", "password": "s3cr3t-pass"}


@pytest.fixture
def bearer_properties() -> Dict[str, Any]:
    return {"accessToken": "tok-abc-123"}


@pytest.fixture
def api_key_properties() -> Dict[str, Any]:
    return {"header": "X-API-Key", "value": "key-987"}


@pytest.fixture
def rule_mapper():
    """Mock rule mapper standing in for the external rule compiler."""
    mapper = MagicMock()
    mapper.to_action_rule.side_effect = lambda rule, action_type, tenant: {
        "compiled": rule,
        "actionType": action_type.value,
        "tenant": tenant,
    }
    mapper.to_or_rule_response.side_effect = lambda action_rule: {"orRules": [action_rule]}
    return mapper
