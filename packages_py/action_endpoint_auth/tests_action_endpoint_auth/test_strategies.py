import base64

import pytest

from action_endpoint_auth import (
    AuthenticationType,
    BasicAuthentication,
    BearerAuthentication,
    ApiKeyAuthentication,
    NoneAuthentication,
    UnsupportedAuthSchemeError,
    build_authentication,
    resolve_auth_headers,
)


class TestResolveAuthHeaders:

    def test_basic_auth(self):
        username = "user"
        password = "password123"
        auth = BasicAuthentication(username=username, password=password)
        headers = resolve_auth_headers(auth)

        expected_b64 = base64.b64encode(f"{username}:{password}".encode()).decode()
        assert headers == {"Authorization": f"Basic {expected_b64}"}

    def test_bearer_auth(self):
        auth = BearerAuthentication(access_token="test-token-123")
        assert resolve_auth_headers(auth) == {"Authorization": "Bearer test-token-123"}

    def test_api_key_auth(self):
        auth = ApiKeyAuthentication(header="X-API-Key", value="my-api-key")
        assert resolve_auth_headers(auth) == {"X-API-Key": "my-api-key"}

    def test_none_auth(self):
        assert resolve_auth_headers(NoneAuthentication()) == {}

    def test_from_built_value(self, api_key_properties):
        auth = build_authentication(AuthenticationType.API_KEY, api_key_properties)
        assert resolve_auth_headers(auth) == {"X-API-Key": "key-987"}

    def test_unknown_value(self):
        with pytest.raises(UnsupportedAuthSchemeError):
            resolve_auth_headers(object())
