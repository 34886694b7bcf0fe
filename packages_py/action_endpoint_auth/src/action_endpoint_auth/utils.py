"""Helpers shared by the mappers."""
import logging
from typing import Any, Optional

from .settings import get_settings

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


def mask_sensitive(value: Optional[Any], visible_chars: int = 3) -> str:
    """Mask a value for safe logging, keeping only the first visible_chars."""
    if value is None:
        return "<None>"
    if not isinstance(value, str):
        return "<invalid-type>"
    if not value:
        return "<empty>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "***"


def build_uri_for_action_type(action_type_path: str) -> str:
    """
    Build the collection URI for actions of one type.

    Args:
        action_type_path: URL path segment of the action type (e.g. 'preIssueAccessToken')

    Returns:
        URI such as '/api/server/v1/actions/preIssueAccessToken'
    """
    base_path = get_settings().ACTIONS_API_BASE_PATH.rstrip(PATH_SEPARATOR)
    uri = f"{base_path}{PATH_SEPARATOR}{action_type_path}"
    logger.debug(f"build_uri_for_action_type: Built uri='{uri}'")
    return uri
