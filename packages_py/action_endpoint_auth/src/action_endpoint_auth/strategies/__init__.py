import base64
import logging
from typing import Dict

from ..config import (
    ApiKeyAuthentication,
    Authentication,
    BasicAuthentication,
    BearerAuthentication,
    NoneAuthentication,
)
from ..errors import UnsupportedAuthSchemeError

logger = logging.getLogger(__name__)


def _base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def resolve_auth_headers(authentication: Authentication) -> Dict[str, str]:
    """
    Resolve the headers an outbound call to an action endpoint carries.

    Secrets are unwrapped here and nowhere else.
    """
    logger.debug(
        f"resolve_auth_headers: Resolving headers for {type(authentication).__name__}"
    )

    if isinstance(authentication, NoneAuthentication):
        return {}

    if isinstance(authentication, BasicAuthentication):
        # RFC 7617
        credentials = f"{authentication.username}:{authentication.password.get_secret_value()}"
        return {"Authorization": f"Basic {_base64_encode(credentials)}"}

    if isinstance(authentication, BearerAuthentication):
        # RFC 6750
        return {"Authorization": f"Bearer {authentication.access_token.get_secret_value()}"}

    if isinstance(authentication, ApiKeyAuthentication):
        return {authentication.header: authentication.value.get_secret_value()}

    raise UnsupportedAuthSchemeError(getattr(authentication, "type", authentication))
