"""
Merge several form documents into one.

Rules:
    - Header (version, form_id, title, description): explicit override,
      else taken from the FIRST form. Never combined.
    - Fields: first-seen order across all forms. A repeated id is skipped
      when deep-equal to the field already taken, otherwise the merge
      fails with DuplicateFieldError.
    - Dependencies: concatenated in order. An id-bearing dependency is
      kept only the first time its id is seen; id-less dependencies are
      always kept, even when identical.
    - Functions and metadata: shallow merge, later forms win.
    - Settings, theme, i18n: from the first form that declares them.
    - Steps and groups: concatenated, first occurrence of each id wins.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Set

from gff.conditions import Dependency
from gff.equality import deep_equal
from gff.errors import raise_duplicate_field_error, raise_form_creation_error
from gff.model import Field, FieldGroup, FormDefinition, FormStep, FunctionDef
from gff.serialization import field_to_dict


logger = logging.getLogger(__name__)


def _merge_fields(forms: Sequence[FormDefinition]) -> List[Field]:
    merged: List[Field] = []
    seen: Dict[str, Dict[str, Any]] = {}

    for form in forms:
        for field in form.fields:
            encoded = field_to_dict(field)
            existing = seen.get(field.id)
            if existing is None:
                seen[field.id] = encoded
                merged.append(field)
            elif not deep_equal(existing, encoded):
                raise_duplicate_field_error(
                    field.id,
                    f"Cannot merge forms: fields with same ID have different content (conflict in form '{form.form_id}')",
                )
            else:
                logger.debug("merge: identical field %r from form %r skipped", field.id, form.form_id)

    return merged


def _merge_dependencies(forms: Sequence[FormDefinition]) -> List[Dependency]:
    merged: List[Dependency] = []
    seen_ids: Set[str] = set()

    for form in forms:
        for dep in form.dependencies or []:
            if dep.id:
                if dep.id in seen_ids:
                    logger.debug("merge: dependency %r from form %r dropped", dep.id, form.form_id)
                    continue
                seen_ids.add(dep.id)
            merged.append(dep)

    return merged


def _merge_functions(forms: Sequence[FormDefinition]) -> Dict[str, FunctionDef]:
    merged: Dict[str, FunctionDef] = {}
    for form in forms:
        for name, fn in (form.functions or {}).items():
            if name in merged:
                logger.debug("merge: function %r overridden by form %r", name, form.form_id)
            merged[name] = fn
    return merged


def _merge_metadata(forms: Sequence[FormDefinition]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for form in forms:
        if form.metadata:
            merged.update(form.metadata)
    return merged


def _first_declared(forms: Sequence[FormDefinition], attr: str) -> Any:
    for form in forms:
        value = getattr(form, attr)
        if value is not None:
            return value
    return None


def _merge_by_id(forms: Sequence[FormDefinition], attr: str) -> Optional[list]:
    declared = [getattr(form, attr) for form in forms if getattr(form, attr) is not None]
    if not declared:
        return None
    merged = []
    seen_ids: Set[str] = set()
    for items in declared:
        for item in items:
            if item.id in seen_ids:
                continue
            seen_ids.add(item.id)
            merged.append(item)
    return merged


def merge_forms(
    forms: Sequence[FormDefinition],
    form_id: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    version: Optional[str] = None,
) -> FormDefinition:
    """
    Combine `forms` into a single form.

    A single form is returned as-is (the same object, not a copy).

    Raises:
        FormCreationError: If `forms` is empty
        DuplicateFieldError: If two forms define different fields with
            the same id
    """
    if not forms:
        raise_form_creation_error("At least one form must be provided for merging")

    if len(forms) == 1:
        return forms[0]

    first = forms[0]
    steps: Optional[List[FormStep]] = _merge_by_id(forms, "steps")
    groups: Optional[List[FieldGroup]] = _merge_by_id(forms, "groups")

    merged = FormDefinition(
        form_id=form_id or first.form_id,
        version=version or first.version,
        title=title or first.title,
        description=description or first.description,
        fields=_merge_fields(forms),
        dependencies=_merge_dependencies(forms),
        functions=_merge_functions(forms),
        metadata=_merge_metadata(forms),
        settings=_first_declared(forms, "settings"),
        steps=steps,
        groups=groups,
        theme=_first_declared(forms, "theme"),
        i18n=_first_declared(forms, "i18n"),
    )
    logger.debug(
        "merged %d forms into %r (%d fields, %d dependencies)",
        len(forms), merged.form_id, len(merged.fields), len(merged.dependencies),
    )
    return merged
