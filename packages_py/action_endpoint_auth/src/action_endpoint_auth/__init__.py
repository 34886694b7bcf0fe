"""
Action endpoint authentication.

This package provides:
- domain: authentication types and their required properties
- config: immutable authentication values and the type-only summary
- mapper: property bag validation and construction, summaries
- strategies: outbound request headers for an authentication value
- action_mapper: action create/update/response mapping
"""
from .domain import AuthenticationType, AuthenticationProperty, REQUIRED_PROPERTIES
from .config import (
    Authentication,
    NoneAuthentication,
    BasicAuthentication,
    BearerAuthentication,
    ApiKeyAuthentication,
    SchemeSummary,
)
from .errors import (
    ActionAuthError,
    ErrorMessage,
    MissingAuthPropertyError,
    EmptyAuthPropertyError,
    UnsupportedAuthSchemeError,
)
from .mapper import build_authentication, resolve_authentication_type, summarize
from .strategies import resolve_auth_headers
from .action_mapper import (
    RuleMapper,
    build_action_request,
    build_updating_action_request,
    build_action_response,
    build_action_basic_response,
)
from .settings import Settings, get_settings, configure_logging

__all__ = [
    # Domain
    "AuthenticationType",
    "AuthenticationProperty",
    "REQUIRED_PROPERTIES",
    # Values
    "Authentication",
    "NoneAuthentication",
    "BasicAuthentication",
    "BearerAuthentication",
    "ApiKeyAuthentication",
    "SchemeSummary",
    # Errors
    "ActionAuthError",
    "ErrorMessage",
    "MissingAuthPropertyError",
    "EmptyAuthPropertyError",
    "UnsupportedAuthSchemeError",
    # Mapping
    "build_authentication",
    "resolve_authentication_type",
    "summarize",
    "resolve_auth_headers",
    "RuleMapper",
    "build_action_request",
    "build_updating_action_request",
    "build_action_response",
    "build_action_basic_response",
    # Settings
    "Settings",
    "get_settings",
    "configure_logging",
]
