"""
Form mutation API.

Every operation takes a FormDefinition and returns a new one; the input
form is never modified. Structural problems are raised through the error
channel (see gff.errors).

Field identity rule:
    adding a field whose id already exists is a no-op when the two fields
    are deep-equal, and a DuplicateFieldError otherwise.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Optional

from gff.conditions import Dependency
from gff.equality import deep_equal
from gff.errors import raise_duplicate_field_error, raise_form_creation_error
from gff.model import Field, FieldType, FormDefinition, FunctionDef
from gff.serialization import field_to_dict


logger = logging.getLogger(__name__)


def create_form(
    form_id: str,
    title: Optional[str] = None,
    description: Optional[str] = None,
    version: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> FormDefinition:
    """
    Create an empty form.

    Args:
        form_id: Non-empty form identifier
        version: Format version, "1.0" when not given

    Raises:
        FormCreationError: If form_id is empty or not a string
    """
    if not form_id or not isinstance(form_id, str):
        raise_form_creation_error("formId must be a non-empty string")

    return FormDefinition(
        form_id=form_id,
        version=version or "1.0",
        title=title,
        description=description,
        fields=[],
        dependencies=[],
        functions={},
        metadata=metadata,
    )


def fields_equal(a: Field, b: Field) -> bool:
    """Deep structural comparison of two fields in their wire form."""
    return deep_equal(field_to_dict(a), field_to_dict(b))


def _check_field(field: Field) -> None:
    if not field.id or not isinstance(field.id, str):
        raise_form_creation_error("Field must have a non-empty string id")

    if not field.type:
        raise_form_creation_error("Field must have a type")

    try:
        field_type = FieldType(field.type)
    except ValueError:
        raise_form_creation_error(f"Unknown field type: {field.type!r}")

    # Caption is optional for hidden fields
    if field_type is not FieldType.HIDDEN and (not field.caption or not isinstance(field.caption, str)):
        raise_form_creation_error("Field must have a non-empty string caption")


def add_field(form: FormDefinition, field: Field) -> FormDefinition:
    """
    Append `field` to the form.

    Returns the form unchanged if an identical field with the same id is
    already present.

    Raises:
        FormCreationError: If the field has no id, no type, or (unless
            hidden) no caption
        DuplicateFieldError: If a different field with this id exists
    """
    _check_field(field)

    existing = form.get_field(field.id)
    if existing is not None:
        if not fields_equal(existing, field):
            raise_duplicate_field_error(field.id, "A different field with this ID already exists")
        logger.debug("field %r already present and identical; skipping", field.id)
        return form

    return dataclasses.replace(form, fields=[*form.fields, field])


def remove_field(form: FormDefinition, field_id: str) -> FormDefinition:
    """Remove the field with `field_id`; absent ids are ignored."""
    return dataclasses.replace(form, fields=[f for f in form.fields if f.id != field_id])


def get_field(form: FormDefinition, field_id: str) -> Optional[Field]:
    return form.get_field(field_id)


def update_field(form: FormDefinition, field_id: str, **updates: Any) -> FormDefinition:
    """
    Replace attributes of an existing field, keeping its position.

    Example:
        form = update_field(form, "email", caption="Work email", required=True)

    Raises:
        FormCreationError: If no field has this id, or `updates` tries to
            change the id
    """
    index = next((i for i, f in enumerate(form.fields) if f.id == field_id), None)
    if index is None:
        raise_form_creation_error(f'Field with ID "{field_id}" not found')

    if "id" in updates:
        raise_form_creation_error(f'Field ID "{field_id}" cannot be changed by update_field')

    fields = list(form.fields)
    fields[index] = dataclasses.replace(fields[index], **updates)
    return dataclasses.replace(form, fields=fields)


def add_dependency(form: FormDefinition, dependency: Dependency) -> FormDefinition:
    """Append `dependency`. No duplicate check is made."""
    return dataclasses.replace(form, dependencies=[*(form.dependencies or []), dependency])


def remove_dependency(form: FormDefinition, dependency_id: str) -> FormDefinition:
    """Remove dependencies with this id. Dependencies without an id are kept."""
    return dataclasses.replace(
        form,
        dependencies=[d for d in (form.dependencies or []) if d.id != dependency_id],
    )


def add_function(form: FormDefinition, name: str, function_def: FunctionDef) -> FormDefinition:
    """Declare `function_def` under `name`, replacing any previous entry."""
    return dataclasses.replace(form, functions={**(form.functions or {}), name: function_def})


def remove_function(form: FormDefinition, name: str) -> FormDefinition:
    functions = {k: v for k, v in (form.functions or {}).items() if k != name}
    return dataclasses.replace(form, functions=functions)
