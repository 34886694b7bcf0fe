"""
Action request, domain and response models.

Request models mirror the action management API payloads. The
authentication block of a request stays an untyped property bag until the
mapper turns it into an authentication value; response models only ever
carry a SchemeSummary for it.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import Authentication, SchemeSummary


class ActionType(str, Enum):
    """Action types and the URL path segment each is served under."""

    PRE_ISSUE_ACCESS_TOKEN = "PRE_ISSUE_ACCESS_TOKEN"
    PRE_UPDATE_PASSWORD = "PRE_UPDATE_PASSWORD"
    PRE_UPDATE_PROFILE = "PRE_UPDATE_PROFILE"
    PRE_REGISTRATION = "PRE_REGISTRATION"
    AUTHENTICATION = "AUTHENTICATION"

    @property
    def path_param(self) -> str:
        head, *rest = self.value.lower().split("_")
        return head + "".join(part.capitalize() for part in rest)


class ActionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class LinkMethod(str, Enum):
    GET = "GET"


# --- Request side ---

class AuthenticationModel(BaseModel):
    """Authentication block of an inbound request."""

    type: str
    properties: Optional[Dict[str, Any]] = None


class EndpointModel(BaseModel):
    uri: str
    authentication: AuthenticationModel


class EndpointUpdateModel(BaseModel):
    uri: Optional[str] = None
    authentication: Optional[AuthenticationModel] = None


class ActionModel(BaseModel):
    """Payload for creating an action."""

    name: str
    description: Optional[str] = None
    endpoint: EndpointModel
    rule: Optional[Any] = None


class ActionUpdateModel(BaseModel):
    """Payload for updating an action. Absent fields are left unchanged."""

    name: Optional[str] = None
    description: Optional[str] = None
    endpoint: Optional[EndpointUpdateModel] = None
    rule: Optional[Any] = None


# --- Domain side ---

class EndpointConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: Optional[str] = None
    authentication: Optional[Authentication] = None


class Action(BaseModel):
    """Action handed to, or returned from, the action management service."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    type: Optional[ActionType] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ActionStatus] = None
    endpoint: Optional[EndpointConfig] = None
    rule: Optional[Any] = None


# --- Response side ---

class EndpointResponse(BaseModel):
    uri: str
    authentication: SchemeSummary


class Link(BaseModel):
    href: str
    rel: str
    method: LinkMethod


class ActionResponse(BaseModel):
    id: str
    type: ActionType
    name: str
    description: Optional[str] = None
    status: ActionStatus
    endpoint: EndpointResponse
    rule: Optional[Any] = None


class ActionBasicResponse(BaseModel):
    id: str
    type: ActionType
    name: str
    description: Optional[str] = None
    status: ActionStatus
    links: List[Link] = Field(default_factory=list)


__all__ = [
    "ActionType",
    "ActionStatus",
    "LinkMethod",
    "AuthenticationModel",
    "EndpointModel",
    "EndpointUpdateModel",
    "ActionModel",
    "ActionUpdateModel",
    "EndpointConfig",
    "Action",
    "EndpointResponse",
    "Link",
    "ActionResponse",
    "ActionBasicResponse",
]
