"""
Client errors raised while mapping action endpoint authentication.

Every error here is caused by caller-supplied data. Translating them into a
transport-level response is left to the caller.
"""
from enum import Enum
from typing import Any, Optional


class ErrorMessage(Enum):
    """Error code, message and description triples."""

    ERROR_MISSING_ACTION_ENDPOINT_AUTHENTICATION_PROPERTIES = (
        "ACTION-60006",
        "Required authentication properties are not provided.",
        "Authentication type {scheme} requires the property '{property_name}'.",
    )
    ERROR_EMPTY_ACTION_ENDPOINT_AUTHENTICATION_PROPERTIES = (
        "ACTION-60007",
        "Authentication property values cannot be empty.",
        "Authentication property '{property_name}' of type {scheme} must be a non-empty string.",
    )
    ERROR_UNSUPPORTED_ACTION_ENDPOINT_AUTHENTICATION_TYPE = (
        "ACTION-60008",
        "Unsupported authentication type.",
        "Authentication type '{scheme}' is not supported.",
    )

    def __init__(self, code: str, message: str, description: str) -> None:
        self.code = code
        self.message = message
        self.description = description


def _scheme_name(scheme: Any) -> str:
    return getattr(scheme, "value", None) or str(scheme)


class ActionAuthError(Exception):
    """Base class for action endpoint authentication errors."""

    error: ErrorMessage

    def __init__(self, scheme: Any, property_name: Optional[str] = None) -> None:
        self.scheme = scheme
        self.property_name = property_name
        self.code = self.error.code
        self.message = self.error.message
        self.description = self.error.description.format(
            scheme=_scheme_name(scheme),
            property_name=property_name,
        )
        super().__init__(f"{self.message} {self.description}")
        self.name = type(self).__name__

    def to_dict(self) -> dict:
        """Error body as the API layer renders it."""
        return {
            "code": self.code,
            "message": self.message,
            "description": self.description,
        }


class MissingAuthPropertyError(ActionAuthError):
    """A property required by the authentication type was not supplied."""

    error = ErrorMessage.ERROR_MISSING_ACTION_ENDPOINT_AUTHENTICATION_PROPERTIES

    def __init__(self, scheme: Any, property_name: str) -> None:
        super().__init__(scheme, property_name)


class EmptyAuthPropertyError(ActionAuthError):
    """A required property was supplied without a usable value."""

    error = ErrorMessage.ERROR_EMPTY_ACTION_ENDPOINT_AUTHENTICATION_PROPERTIES

    def __init__(self, scheme: Any, property_name: str) -> None:
        super().__init__(scheme, property_name)


class UnsupportedAuthSchemeError(ActionAuthError):
    """The authentication type is not one of the known types."""

    error = ErrorMessage.ERROR_UNSUPPORTED_ACTION_ENDPOINT_AUTHENTICATION_TYPE

    def __init__(self, scheme: Any) -> None:
        super().__init__(scheme)
