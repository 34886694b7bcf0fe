"""
Authentication types and property names for action endpoints.

An action endpoint is called with exactly one of a fixed set of
authentication types. Each type declares the properties a caller must
supply for it, in the order they are validated.
"""
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class AuthenticationType(str, Enum):
    """Authentication type of an action endpoint."""

    NONE = "NONE"
    BASIC = "BASIC"
    BEARER = "BEARER"
    API_KEY = "API_KEY"


class AuthenticationProperty(str, Enum):
    """Property names accepted in an authentication property bag (case-sensitive)."""

    USERNAME = "username"
    PASSWORD = "password"
    ACCESS_TOKEN = "accessToken"
    HEADER = "header"
    VALUE = "value"


# Validation order matters: presence is checked for every entry before emptiness.
REQUIRED_PROPERTIES: Dict[AuthenticationType, Tuple[AuthenticationProperty, ...]] = {
    AuthenticationType.NONE: (),
    AuthenticationType.BASIC: (
        AuthenticationProperty.USERNAME,
        AuthenticationProperty.PASSWORD,
    ),
    AuthenticationType.BEARER: (AuthenticationProperty.ACCESS_TOKEN,),
    AuthenticationType.API_KEY: (
        AuthenticationProperty.HEADER,
        AuthenticationProperty.VALUE,
    ),
}

# Property bag as deserialized from an inbound request payload.
PropertyBag = Mapping[str, Optional[Any]]

# Properties whose values must never leave the process.
SECRET_PROPERTIES = frozenset({
    AuthenticationProperty.PASSWORD,
    AuthenticationProperty.ACCESS_TOKEN,
    AuthenticationProperty.VALUE,
})
