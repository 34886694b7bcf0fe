"""
Mapping between action API payloads and Action objects.

Rule compilation and tenant resolution belong to the caller: a RuleMapper
and the tenant domain are passed in.
"""
import logging
from typing import Any, List, Optional, Protocol

from .mapper import build_authentication, summarize
from .models import (
    Action,
    ActionBasicResponse,
    ActionModel,
    ActionResponse,
    ActionType,
    ActionUpdateModel,
    EndpointConfig,
    EndpointResponse,
    Link,
    LinkMethod,
)
from .utils import PATH_SEPARATOR, build_uri_for_action_type

logger = logging.getLogger(__name__)


class RuleMapper(Protocol):
    """Compiles request rules into action rules and renders them back."""

    def to_action_rule(self, rule: Any, action_type: ActionType, tenant_domain: str) -> Any:
        ...

    def to_or_rule_response(self, action_rule: Any) -> Any:
        ...


def _map_rule(
    rule: Any,
    action_type: ActionType,
    rule_mapper: Optional[RuleMapper],
    tenant_domain: Optional[str],
) -> Any:
    if rule is None:
        return None
    if rule_mapper is None:
        raise ValueError("A rule mapper is required to map an action rule")
    return rule_mapper.to_action_rule(rule, action_type, tenant_domain)


def build_action_request(
    action_type: ActionType,
    action_model: ActionModel,
    rule_mapper: Optional[RuleMapper] = None,
    tenant_domain: Optional[str] = None,
) -> Action:
    """
    Build an Action from a create payload.

    Args:
        action_type: Type of the action being created
        action_model: Create payload
        rule_mapper: Mapper for the payload rule; required only when a rule is present
        tenant_domain: Tenant the rule is compiled for

    Returns:
        Action ready for the action management service

    Raises:
        ActionAuthError: If the endpoint authentication is invalid
    """
    logger.debug(
        f"build_action_request: Building action type='{action_type.value}', "
        f"has_rule={action_model.rule is not None}"
    )
    auth_model = action_model.endpoint.authentication
    authentication = build_authentication(auth_model.type, auth_model.properties)

    return Action(
        name=action_model.name,
        description=action_model.description,
        endpoint=EndpointConfig(
            uri=action_model.endpoint.uri,
            authentication=authentication,
        ),
        rule=_map_rule(action_model.rule, action_type, rule_mapper, tenant_domain),
    )


def build_updating_action_request(
    action_type: ActionType,
    action_update_model: ActionUpdateModel,
    rule_mapper: Optional[RuleMapper] = None,
    tenant_domain: Optional[str] = None,
) -> Action:
    """
    Build an Action from an update payload.

    A missing endpoint or authentication block maps to None, which the
    service treats as unchanged. A supplied authentication block always
    produces a new authentication value.
    """
    logger.debug(
        f"build_updating_action_request: Building update type='{action_type.value}', "
        f"has_endpoint={action_update_model.endpoint is not None}, "
        f"has_rule={action_update_model.rule is not None}"
    )
    endpoint_config = None
    if action_update_model.endpoint is not None:
        authentication = None
        auth_model = action_update_model.endpoint.authentication
        if auth_model is not None:
            authentication = build_authentication(auth_model.type, auth_model.properties)
        endpoint_config = EndpointConfig(
            uri=action_update_model.endpoint.uri,
            authentication=authentication,
        )

    return Action(
        name=action_update_model.name,
        description=action_update_model.description,
        endpoint=endpoint_config,
        rule=_map_rule(action_update_model.rule, action_type, rule_mapper, tenant_domain),
    )


def build_action_response(action: Action, rule_mapper: Optional[RuleMapper] = None) -> ActionResponse:
    """
    Build an ActionResponse from an Action.

    The endpoint authentication is rendered as its type only.
    """
    rule = None
    if action.rule is not None:
        if rule_mapper is None:
            raise ValueError("A rule mapper is required to render an action rule")
        rule = rule_mapper.to_or_rule_response(action.rule)

    return ActionResponse(
        id=action.id,
        type=action.type,
        name=action.name,
        description=action.description,
        status=action.status,
        endpoint=EndpointResponse(
            uri=action.endpoint.uri,
            authentication=summarize(action.endpoint.authentication),
        ),
        rule=rule,
    )


def build_action_basic_response(action: Action) -> ActionBasicResponse:
    """Build an ActionBasicResponse, with a self link, from an Action."""
    return ActionBasicResponse(
        id=action.id,
        type=action.type,
        name=action.name,
        description=action.description,
        status=action.status,
        links=build_links(action),
    )


def build_links(action: Action) -> List[Link]:
    base_url = build_uri_for_action_type(action.type.path_param)
    return [
        Link(
            href=f"{base_url}{PATH_SEPARATOR}{action.id}",
            rel="self",
            method=LinkMethod.GET,
        )
    ]
