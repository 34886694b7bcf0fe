"""
Authentication mapper for action endpoints.

Turns an authentication type plus an untyped property bag into an
immutable authentication value, and projects an existing value into a
summary that exposes the type only.

Validation rules:
- Presence of every required property is checked before any value is
  checked for emptiness, so a missing property is reported ahead of an
  empty one.
- The first violation is raised; errors are not aggregated.
- Properties supplied for NONE are ignored.
"""
import logging
from typing import Dict, Optional, Union

from .config import (
    ApiKeyAuthentication,
    Authentication,
    BasicAuthentication,
    BearerAuthentication,
    NoneAuthentication,
    SchemeSummary,
)
from .domain import (
    REQUIRED_PROPERTIES,
    SECRET_PROPERTIES,
    AuthenticationProperty,
    AuthenticationType,
    PropertyBag,
)
from .errors import (
    EmptyAuthPropertyError,
    MissingAuthPropertyError,
    UnsupportedAuthSchemeError,
)
from .utils import mask_sensitive

logger = logging.getLogger(__name__)


def resolve_authentication_type(scheme: Union[AuthenticationType, str, None]) -> AuthenticationType:
    """
    Resolve an authentication type from an enum member or its name.

    Raises:
        UnsupportedAuthSchemeError: If the value names no known type
    """
    if isinstance(scheme, AuthenticationType):
        return scheme
    if isinstance(scheme, str):
        try:
            return AuthenticationType(scheme)
        except ValueError:
            pass
    logger.debug(f"resolve_authentication_type: Unsupported type '{scheme}'")
    raise UnsupportedAuthSchemeError(scheme)


def _require_properties(
    auth_type: AuthenticationType,
    properties: Optional[PropertyBag],
) -> Dict[AuthenticationProperty, str]:
    required = REQUIRED_PROPERTIES[auth_type]
    supplied = properties if properties is not None else {}

    for prop in required:
        if prop.value not in supplied:
            logger.debug(
                f"_require_properties: Missing property '{prop.value}' for type '{auth_type.value}'"
            )
            raise MissingAuthPropertyError(auth_type, prop.value)

    values = {}
    for prop in required:
        value = supplied[prop.value]
        if not isinstance(value, str) or not value:
            logger.debug(
                f"_require_properties: Empty property '{prop.value}' for type '{auth_type.value}' "
                f"value={'<redacted>' if prop in SECRET_PROPERTIES else mask_sensitive(value)}"
            )
            raise EmptyAuthPropertyError(auth_type, prop.value)
        values[prop] = value
    return values


def build_authentication(
    scheme: Union[AuthenticationType, str, None],
    properties: Optional[PropertyBag] = None,
) -> Authentication:
    """
    Build an authentication value from a type and its properties.

    Args:
        scheme: Authentication type, as an enum member or its name
        properties: Property bag from the request; may be None for NONE

    Returns:
        Authentication value matching the type

    Raises:
        MissingAuthPropertyError: If a required property is absent
        EmptyAuthPropertyError: If a required property is empty or not a string
        UnsupportedAuthSchemeError: If the type is unknown
    """
    auth_type = resolve_authentication_type(scheme)
    logger.debug(
        f"build_authentication: Building type='{auth_type.value}', "
        f"property_keys={list(properties.keys()) if properties else []}"
    )

    if auth_type == AuthenticationType.NONE:
        return NoneAuthentication()

    values = _require_properties(auth_type, properties)

    if auth_type == AuthenticationType.BASIC:
        username = values[AuthenticationProperty.USERNAME]
        logger.debug(f"build_authentication: Basic auth user='{mask_sensitive(username)}'")
        return BasicAuthentication(
            username=username,
            password=values[AuthenticationProperty.PASSWORD],
        )

    if auth_type == AuthenticationType.BEARER:
        return BearerAuthentication(
            access_token=values[AuthenticationProperty.ACCESS_TOKEN],
        )

    if auth_type == AuthenticationType.API_KEY:
        header = values[AuthenticationProperty.HEADER]
        logger.debug(f"build_authentication: API key header='{mask_sensitive(header)}'")
        return ApiKeyAuthentication(
            header=header,
            value=values[AuthenticationProperty.VALUE],
        )

    raise UnsupportedAuthSchemeError(auth_type)


def summarize(authentication: Authentication) -> SchemeSummary:
    """Project an authentication value to its type only."""
    return SchemeSummary(type=authentication.type)
