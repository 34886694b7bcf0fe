"""
Immutable authentication values for action endpoints.

One frozen model per authentication type. The ``type`` field is a
``Literal`` on each model so a value can never carry a tag that disagrees
with its payload, and the union is discriminated on it.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .domain import AuthenticationType


class _AuthenticationBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NoneAuthentication(_AuthenticationBase):
    type: Literal[AuthenticationType.NONE] = AuthenticationType.NONE


class BasicAuthentication(_AuthenticationBase):
    type: Literal[AuthenticationType.BASIC] = AuthenticationType.BASIC
    username: str
    password: SecretStr


class BearerAuthentication(_AuthenticationBase):
    type: Literal[AuthenticationType.BEARER] = AuthenticationType.BEARER
    access_token: SecretStr


class ApiKeyAuthentication(_AuthenticationBase):
    type: Literal[AuthenticationType.API_KEY] = AuthenticationType.API_KEY
    header: str
    value: SecretStr


Authentication = Annotated[
    Union[
        NoneAuthentication,
        BasicAuthentication,
        BearerAuthentication,
        ApiKeyAuthentication,
    ],
    Field(discriminator="type"),
]


class SchemeSummary(BaseModel):
    """
    Externally visible view of an authentication value.

    Carries the authentication type only. Extra fields are forbidden, so
    credentials cannot be attached to it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: AuthenticationType
