"""
Builders for reactive rules and function definitions.

Pure value constructors: operators and actions may be given as enum
members or their wire strings ("equals", "show", ...). Nothing is
validated beyond that.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from gff.conditions import (
    CompoundCondition,
    Condition,
    ConditionOperator,
    Dependency,
    Effect,
    EffectAction,
    LogicalOperator,
    SimpleCondition,
)
from gff.model import FunctionDef, FunctionType


def create_condition(
    operator: Union[ConditionOperator, str],
    value: Any = None,
    source_field_id: Optional[str] = None,
) -> SimpleCondition:
    return SimpleCondition(
        operator=ConditionOperator(operator),
        value=value,
        source_field_id=source_field_id,
    )


def create_compound_condition(
    operator: Union[LogicalOperator, str],
    conditions: Iterable[Condition],
) -> CompoundCondition:
    return CompoundCondition(operator=LogicalOperator(operator), conditions=list(conditions))


def create_effect(
    target_field_id: str,
    action: Union[EffectAction, str],
    params: Optional[Dict[str, Any]] = None,
    value: Any = None,
) -> Effect:
    return Effect(
        target_field_id=target_field_id,
        action=EffectAction(action),
        params=params,
        value=value,
    )


def show_effect(target_field_id: str) -> Effect:
    return create_effect(target_field_id, EffectAction.SHOW)


def hide_effect(target_field_id: str) -> Effect:
    return create_effect(target_field_id, EffectAction.HIDE)


def enable_effect(target_field_id: str) -> Effect:
    return create_effect(target_field_id, EffectAction.ENABLE)


def disable_effect(target_field_id: str) -> Effect:
    return create_effect(target_field_id, EffectAction.DISABLE)


def require_effect(target_field_id: str) -> Effect:
    return create_effect(target_field_id, EffectAction.REQUIRE)


def unrequire_effect(target_field_id: str) -> Effect:
    return create_effect(target_field_id, EffectAction.UNREQUIRE)


def update_params_effect(target_field_id: str, params: Dict[str, Any]) -> Effect:
    return create_effect(target_field_id, EffectAction.UPDATE_PARAMS, params=params)


def set_value_effect(target_field_id: str, value: Any) -> Effect:
    return create_effect(target_field_id, EffectAction.SET_VALUE, value=value)


def clear_value_effect(target_field_id: str) -> Effect:
    return create_effect(target_field_id, EffectAction.CLEAR_VALUE)


def create_dependency(
    source_field_id: str,
    condition: Condition,
    effects: Iterable[Effect],
    id: Optional[str] = None,
) -> Dependency:
    return Dependency(
        source_field_id=source_field_id,
        condition=condition,
        effects=list(effects),
        id=id,
    )


def create_function_def(
    type: Union[FunctionType, str],
    description: Optional[str] = None,
    params: Optional[List[str]] = None,
    returns: Optional[str] = None,
) -> FunctionDef:
    return FunctionDef(
        type=FunctionType(type),
        description=description,
        params=params,
        returns=returns,
    )


def create_datasource_function(description: Optional[str] = None, params: Optional[List[str]] = None) -> FunctionDef:
    """A datasource returns an array (e.g. options for a select)."""
    return create_function_def(FunctionType.DATASOURCE, description, params, returns="array")


def create_validator_function(description: Optional[str] = None, params: Optional[List[str]] = None) -> FunctionDef:
    """A validator returns a boolean."""
    return create_function_def(FunctionType.VALIDATOR, description, params, returns="boolean")


def create_transformer_function(
    description: Optional[str] = None,
    params: Optional[List[str]] = None,
    returns: Optional[str] = None,
) -> FunctionDef:
    return create_function_def(FunctionType.TRANSFORMER, description, params, returns)
