"""
Reactive rule model for GFF forms.

A Dependency says: "when `condition` holds for the value of
`source_field_id`, apply `effects` to their target fields".

Conditions are trees: leaves compare a field value against an operand,
compound nodes combine child conditions with and/or/not. They are built
bottom-up by value, so no cycles are possible.

ARCHITECTURAL RULE:
    These objects are structure only.
    Nothing here evaluates a condition or applies an effect;
    that belongs to whatever renders the form.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Condition(ABC):
    """
    Base class for all condition nodes.

    Exists to give the condition hierarchy a common type.
    Do NOT add evaluation logic here.
    """
    pass


class ConditionOperator(Enum):
    """Comparison operators for leaf conditions."""

    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    IS_EMPTY = "isEmpty"
    IS_NOT_EMPTY = "isNotEmpty"
    MATCHES = "matches"
    IN = "in"
    NOT_IN = "notIn"


class LogicalOperator(Enum):
    """Operators for compound conditions."""

    AND = "and"
    OR = "or"
    NOT = "not"


@dataclass(frozen=True)
class SimpleCondition(Condition):
    """
    A leaf comparison.

    Example:
        attendanceType == "virtual"

    Becomes:
        SimpleCondition(operator=ConditionOperator.EQUALS, value="virtual")

    Properties:
        operator: ConditionOperator
        value: Operand to compare against (absent for isEmpty/isNotEmpty)
        source_field_id: Overrides the dependency's source field for this leaf
    """

    operator: ConditionOperator
    value: Any = None
    source_field_id: Optional[str] = None


@dataclass(frozen=True)
class CompoundCondition(Condition):
    """
    Combines child conditions.

    Example:
        attendanceType == "in-person" OR attendanceType == "hybrid"

    Becomes:
        CompoundCondition(
            operator=LogicalOperator.OR,
            conditions=[
                SimpleCondition(ConditionOperator.EQUALS, "in-person"),
                SimpleCondition(ConditionOperator.EQUALS, "hybrid"),
            ],
        )

    `not` conventionally wraps a single child.
    """

    operator: LogicalOperator
    conditions: List[Condition] = field(default_factory=list)


class EffectAction(Enum):
    """Actions an effect can apply to its target field."""

    SHOW = "show"
    HIDE = "hide"
    ENABLE = "enable"
    DISABLE = "disable"
    REQUIRE = "require"
    UNREQUIRE = "unrequire"
    UPDATE_PARAMS = "updateParams"
    SET_VALUE = "setValue"
    CLEAR_VALUE = "clearValue"


@dataclass(frozen=True)
class Effect:
    """
    A declared action on a target field.

    `params` is only meaningful for updateParams, `value` for setValue.
    """

    target_field_id: str
    action: EffectAction
    params: Optional[Dict[str, Any]] = None
    value: Any = None


@dataclass(frozen=True)
class Dependency:
    """
    A reactive rule linking a source field to effects on other fields.

    Properties:
        source_field_id: Field whose value the condition is checked against
        condition: Root of the condition tree
        effects: Ordered effects applied when the condition holds
        id: Optional identifier, required for removal and merge de-duplication
    """

    source_field_id: str
    condition: Condition
    effects: List[Effect] = field(default_factory=list)
    id: Optional[str] = None
