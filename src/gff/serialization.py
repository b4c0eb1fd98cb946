"""
Serialization helpers for GFF objects (FormDefinition, Field, Dependency, etc.).

Provides JSON/YAML round-trip via an intermediate dict representation.
Python attributes are snake_case; wire keys are camelCase
(`form_id` -> "formId", `options_function` -> "optionsFunction").
Attributes holding None are absent and are omitted from the output.

Decoding checks only the document's top-level shape (version, formId,
fields). Field-level invariants are the job of `gff.form.add_field` at
construction time, or of `gff.analyzer.analyze_form` for decoded documents.
"""
from __future__ import annotations

import dataclasses
import json
import re
import typing
import warnings
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml

from gff.conditions import (
    Condition,
    CompoundCondition,
    ConditionOperator,
    Dependency,
    Effect,
    EffectAction,
    LogicalOperator,
    SimpleCondition,
)
from gff.errors import raise_form_creation_error
from gff.model import (
    PARAMS_BY_TYPE,
    Field,
    FieldGroup,
    FieldType,
    FormDefinition,
    FormSettings,
    FormStep,
    FormTheme,
    FunctionDef,
    FunctionType,
    I18nConfig,
)
from gff.params import FieldParams


_CAMEL_RE = re.compile(r"_([a-z0-9])")

# Field attributes encoded explicitly by field_to_dict/field_from_dict
_FIELD_HEAD = ("id", "type", "caption", "params")


def _camel(name: str) -> str:
    return _CAMEL_RE.sub(lambda m: m.group(1).upper(), name)


def _value_to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_value_to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _value_to_plain(v) for k, v in value.items()}
    return value


def dataclass_to_dict(obj: Any, skip: tuple = ()) -> Dict[str, Any]:
    """Encode a model dataclass with camelCase keys, dropping None attributes."""
    out: Dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        if f.name in skip:
            continue
        value = getattr(obj, f.name)
        if value is None:
            continue
        out[_camel(f.name)] = _value_to_plain(value)
    return out


def _unwrap_optional(hint: Any) -> Any:
    if typing.get_origin(hint) is typing.Union:
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _plain_to_value(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    hint = _unwrap_optional(hint)
    origin = typing.get_origin(hint)

    if origin is typing.Union:
        # e.g. Union[str, Option]: pick the dataclass member for mappings
        if isinstance(value, dict):
            for arg in typing.get_args(hint):
                if dataclasses.is_dataclass(arg):
                    return dataclass_from_dict(arg, value)
        return value
    if origin in (list, List):
        (item_hint,) = typing.get_args(hint) or (Any,)
        if not isinstance(value, list):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        return [_plain_to_value(item_hint, v) for v in value]
    if isinstance(hint, type) and issubclass(hint, Enum):
        return hint(value)
    if dataclasses.is_dataclass(hint):
        if not isinstance(value, dict):
            raise TypeError(f"expected an object for {hint.__name__}, got {type(value).__name__}")
        return dataclass_from_dict(hint, value)
    return value


def _decode_kwargs(cls: type, d: Dict[str, Any], skip: tuple = ()) -> Dict[str, Any]:
    hints = typing.get_type_hints(cls)
    by_wire = {_camel(f.name): f for f in dataclasses.fields(cls) if f.name not in skip}
    skipped = {_camel(name) for name in skip}
    kwargs: Dict[str, Any] = {}
    for key, raw in d.items():
        if key in skipped:
            continue
        f = by_wire.get(key)
        if f is None:
            warnings.warn(f"Ignoring unknown {cls.__name__} key '{key}'", UserWarning)
            continue
        kwargs[f.name] = _plain_to_value(hints[f.name], raw)
    return kwargs


def dataclass_from_dict(cls: type, d: Dict[str, Any]) -> Any:
    """
    Decode a camelCase mapping into `cls`.

    Unknown keys are dropped with a UserWarning.
    """
    return cls(**_decode_kwargs(cls, d))


def params_to_dict(params: FieldParams) -> Dict[str, Any]:
    return dataclass_to_dict(params)


def params_from_dict(field_type: FieldType, d: Optional[Dict[str, Any]]) -> FieldParams:
    return dataclass_from_dict(PARAMS_BY_TYPE[field_type], d or {})


def condition_to_dict(c: Condition) -> Dict[str, Any]:
    if isinstance(c, CompoundCondition):
        return {
            "operator": c.operator.value,
            "conditions": [condition_to_dict(child) for child in c.conditions],
        }
    if isinstance(c, SimpleCondition):
        out: Dict[str, Any] = {"operator": c.operator.value}
        if c.value is not None:
            out["value"] = _value_to_plain(c.value)
        if c.source_field_id is not None:
            out["sourceFieldId"] = c.source_field_id
        return out
    raise TypeError(f"Unsupported Condition type: {type(c)}")


def condition_from_dict(d: Dict[str, Any]) -> Condition:
    op = d["operator"]
    if op in {o.value for o in LogicalOperator}:
        return CompoundCondition(
            operator=LogicalOperator(op),
            conditions=[condition_from_dict(child) for child in d.get("conditions", [])],
        )
    return SimpleCondition(
        operator=ConditionOperator(op),
        value=d.get("value"),
        source_field_id=d.get("sourceFieldId"),
    )


def effect_to_dict(e: Effect) -> Dict[str, Any]:
    out: Dict[str, Any] = {"targetFieldId": e.target_field_id, "action": e.action.value}
    if e.params is not None:
        out["params"] = _value_to_plain(e.params)
    if e.value is not None:
        out["value"] = _value_to_plain(e.value)
    return out


def effect_from_dict(d: Dict[str, Any]) -> Effect:
    return Effect(
        target_field_id=d["targetFieldId"],
        action=EffectAction(d["action"]),
        params=d.get("params"),
        value=d.get("value"),
    )


def dependency_to_dict(dep: Dependency) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if dep.id is not None:
        out["id"] = dep.id
    out["sourceFieldId"] = dep.source_field_id
    out["condition"] = condition_to_dict(dep.condition)
    out["effects"] = [effect_to_dict(e) for e in dep.effects]
    return out


def dependency_from_dict(d: Dict[str, Any]) -> Dependency:
    return Dependency(
        id=d.get("id"),
        source_field_id=d["sourceFieldId"],
        condition=condition_from_dict(d["condition"]),
        effects=[effect_from_dict(e) for e in d.get("effects", [])],
    )


def function_to_dict(fn: FunctionDef) -> Dict[str, Any]:
    return dataclass_to_dict(fn)


def function_from_dict(d: Dict[str, Any]) -> FunctionDef:
    return FunctionDef(
        type=FunctionType(d["type"]),
        description=d.get("description"),
        params=d.get("params"),
        returns=d.get("returns"),
    )


def field_to_dict(f: Field) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "id": f.id,
        "type": f.type.value if isinstance(f.type, FieldType) else f.type,
        "caption": f.caption,
        "params": params_to_dict(f.params) if f.params is not None else {},
    }
    out.update(dataclass_to_dict(f, skip=_FIELD_HEAD))
    return out


def field_from_dict(d: Dict[str, Any]) -> Field:
    field_type = FieldType(d["type"])
    return Field(
        id=d["id"],
        type=field_type,
        caption=d.get("caption", ""),
        params=params_from_dict(field_type, d.get("params")),
        **_decode_kwargs(Field, d, skip=_FIELD_HEAD),
    )


def form_to_dict(form: FormDefinition) -> Dict[str, Any]:
    out: Dict[str, Any] = {"version": form.version, "formId": form.form_id}
    if form.title is not None:
        out["title"] = form.title
    if form.description is not None:
        out["description"] = form.description
    out["fields"] = [field_to_dict(f) for f in form.fields]
    if form.dependencies is not None:
        out["dependencies"] = [dependency_to_dict(dep) for dep in form.dependencies]
    if form.functions is not None:
        out["functions"] = {name: function_to_dict(fn) for name, fn in form.functions.items()}
    if form.metadata is not None:
        out["metadata"] = form.metadata
    if form.settings is not None:
        out["settings"] = dataclass_to_dict(form.settings)
    if form.steps is not None:
        out["steps"] = [dataclass_to_dict(s) for s in form.steps]
    if form.groups is not None:
        out["groups"] = [dataclass_to_dict(g) for g in form.groups]
    if form.theme is not None:
        out["theme"] = dataclass_to_dict(form.theme)
    if form.i18n is not None:
        out["i18n"] = dataclass_to_dict(form.i18n)
    return out


def form_from_dict(d: Dict[str, Any]) -> FormDefinition:
    deps = d.get("dependencies")
    functions = d.get("functions")
    steps = d.get("steps")
    groups = d.get("groups")
    return FormDefinition(
        form_id=d["formId"],
        version=d["version"],
        title=d.get("title"),
        description=d.get("description"),
        fields=[field_from_dict(f) for f in d["fields"]],
        dependencies=[dependency_from_dict(dep) for dep in deps] if deps is not None else None,
        functions={name: function_from_dict(fn) for name, fn in functions.items()} if functions is not None else None,
        metadata=d.get("metadata"),
        settings=_optional(FormSettings, d.get("settings")),
        steps=[dataclass_from_dict(FormStep, s) for s in steps] if steps is not None else None,
        groups=[dataclass_from_dict(FieldGroup, g) for g in groups] if groups is not None else None,
        theme=_optional(FormTheme, d.get("theme")),
        i18n=_optional(I18nConfig, d.get("i18n")),
    )


def _optional(cls: type, d: Optional[Dict[str, Any]]) -> Any:
    return dataclass_from_dict(cls, d) if d is not None else None


def _decode_document(data: Any) -> FormDefinition:
    if (
        not isinstance(data, dict)
        or not data.get("version")
        or not data.get("formId")
        or not isinstance(data.get("fields"), list)
    ):
        raise_form_creation_error("Invalid form definition: missing required properties")
    try:
        return form_from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError, RecursionError) as e:
        raise_form_creation_error(f"Invalid form definition: {type(e).__name__}: {e}")


def to_json(form: FormDefinition, pretty: bool = True) -> str:
    """Serialize with 2-space indentation, or with no whitespace at all."""
    d = form_to_dict(form)
    if pretty:
        return json.dumps(d, indent=2, ensure_ascii=False)
    return json.dumps(d, separators=(",", ":"), ensure_ascii=False)


def from_json(s: str) -> FormDefinition:
    try:
        data = json.loads(s)
    except (TypeError, ValueError, RecursionError) as e:
        raise_form_creation_error(f"Failed to parse JSON: {e}")
    return _decode_document(data)


def to_yaml(form: FormDefinition) -> str:
    return yaml.safe_dump(form_to_dict(form), sort_keys=False, allow_unicode=True)


def from_yaml(s: str) -> FormDefinition:
    try:
        data = yaml.safe_load(s)
    except (yaml.YAMLError, RecursionError) as e:
        raise_form_creation_error(f"Failed to parse YAML: {e}")
    return _decode_document(data)

