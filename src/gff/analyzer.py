"""
Form Analyzer: diagnostics and inventory of GFF form documents.

This module provides read-only analysis of FormDefinition objects:
    - Field invariants (the checks construction enforces, re-applied to
      documents that were decoded rather than built)
    - Duplicate field ids
    - Dangling field and function references
    - Condition complexity metrics
    - Cycles between dependencies

IMPORTANT: This does NOT modify the form, and `from_json` does not call it.
Decoded documents are accepted as-is; run the analyzer when you need to
know whether they would have passed construction.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from gff.conditions import CompoundCondition, Condition, SimpleCondition
from gff.model import Field, FieldType, FormDefinition


@dataclass
class ConditionMetrics:
    """Metrics about a single condition tree."""
    depth: int = 0
    node_count: int = 0
    field_references: Set[str] = field(default_factory=set)


def _analyze_condition(condition: Optional[Condition]) -> ConditionMetrics:
    """Recursively analyze a condition tree."""
    if condition is None:
        return ConditionMetrics()

    metrics = ConditionMetrics(depth=1, node_count=1)

    if isinstance(condition, CompoundCondition):
        children = [_analyze_condition(child) for child in condition.conditions]
        if children:
            metrics.depth = 1 + max(child.depth for child in children)
        for child in children:
            metrics.node_count += child.node_count
            metrics.field_references.update(child.field_references)

    elif isinstance(condition, SimpleCondition):
        if condition.source_field_id:
            metrics.field_references.add(condition.source_field_id)

    return metrics


def _find_cycles_dfs(graph: Dict[str, List[str]], start: str, visited: Set[str],
                     rec_stack: Set[str], path: List[str]) -> Optional[List[str]]:
    """DFS to find a cycle starting from a node."""
    visited.add(start)
    rec_stack.add(start)
    path.append(start)

    for neighbor in graph.get(start, []):
        if neighbor not in visited:
            cycle = _find_cycles_dfs(graph, neighbor, visited, rec_stack, path[:])
            if cycle:
                return cycle
        elif neighbor in rec_stack:
            cycle_start_idx = path.index(neighbor)
            return path[cycle_start_idx:] + [neighbor]

    rec_stack.remove(start)
    return None


def field_problems(f: Field) -> List[str]:
    """
    Return the construction-time invariants `f` violates.

    Mirrors gff.form.add_field and the required-parameter checks
    of the builders in gff.fields.
    """
    problems: List[str] = []
    label = f.id or "<no id>"

    if not f.id or not isinstance(f.id, str):
        problems.append("Field must have a non-empty string id")
    if not f.type:
        problems.append(f"Field {label}: missing type")
        return problems
    try:
        field_type = FieldType(f.type)
    except ValueError:
        problems.append(f"Field {label}: unknown type {f.type!r}")
        return problems
    if field_type is not FieldType.HIDDEN and (not f.caption or not isinstance(f.caption, str)):
        problems.append(f"Field {label}: missing caption")

    params = f.params
    if field_type in (FieldType.RADIO, FieldType.SELECT, FieldType.AUTOCOMPLETE):
        if getattr(params, "options", None) is None and not getattr(params, "options_function", None):
            problems.append(f"Field {label}: {field_type.value} field needs options or optionsFunction")
    elif field_type is FieldType.SLIDER:
        if getattr(params, "min", None) is None or getattr(params, "max", None) is None:
            problems.append(f"Field {label}: slider field needs min and max")
    elif field_type is FieldType.NESTED:
        if not getattr(params, "form_id", None):
            problems.append(f"Field {label}: nested field needs formId")

    return problems


@dataclass
class FormReport:
    """Analysis report for a form."""

    form_id: str
    total_fields: int = 0
    total_dependencies: int = 0
    total_functions: int = 0
    field_type_counts: Dict[str, int] = field(default_factory=dict)

    # Invariants
    invalid_fields: Dict[str, List[str]] = field(default_factory=dict)
    duplicate_field_ids: Set[str] = field(default_factory=set)

    # References
    undefined_field_references: Set[str] = field(default_factory=set)
    undefined_functions: Set[str] = field(default_factory=set)
    unused_functions: Set[str] = field(default_factory=set)

    # Dependency graph
    has_cycles: bool = False
    cycle_example: Optional[List[str]] = None

    # Condition complexity
    max_condition_depth: int = 0
    total_condition_nodes: int = 0

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        if msg not in self.errors:
            self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_form(form: FormDefinition) -> FormReport:
    """
    Perform a read-only analysis of a form.

    Errors: broken field invariants, duplicate ids, references to fields
    or functions that do not exist.
    Warnings: unused functions, dependency cycles, deep conditions.
    """
    report = FormReport(form_id=form.form_id)
    dependencies = form.dependencies or []
    functions = form.functions or {}

    report.total_fields = len(form.fields)
    report.total_dependencies = len(dependencies)
    report.total_functions = len(functions)
    report.field_type_counts = dict(Counter(
        f.type.value if isinstance(f.type, FieldType) else str(f.type) for f in form.fields
    ))

    # =========================================================================
    # 1. FIELD INVARIANTS
    # =========================================================================

    id_counts = Counter(f.id for f in form.fields)
    report.duplicate_field_ids = {fid for fid, n in id_counts.items() if n > 1}

    for f in form.fields:
        problems = field_problems(f)
        if problems:
            report.invalid_fields.setdefault(f.id or "", []).extend(problems)

    # =========================================================================
    # 2. REFERENCES
    # =========================================================================

    known_fields: Set[str] = set(id_counts)
    referenced: Set[str] = set()
    depths: List[int] = []

    for dep in dependencies:
        referenced.add(dep.source_field_id)
        metrics = _analyze_condition(dep.condition)
        referenced.update(metrics.field_references)
        depths.append(metrics.depth)
        report.total_condition_nodes += metrics.node_count
        for effect in dep.effects:
            referenced.add(effect.target_field_id)

    for container in (form.steps or []) + (form.groups or []):
        referenced.update(container.fields)

    report.undefined_field_references = referenced - known_fields
    if depths:
        report.max_condition_depth = max(depths)

    used_functions: Set[str] = set()
    for f in form.fields:
        name = getattr(f.params, "options_function", None)
        if name:
            used_functions.add(name)
    report.undefined_functions = used_functions - set(functions)

    # custom validation rules may name a declared validator
    rule_names: Set[str] = set()
    for f in form.fields:
        if f.validation is not None:
            rule_names.update(c.rule for c in f.validation.custom or [])
            rule_names.update(c.rule for c in f.validation.cross_field or [])
    report.unused_functions = set(functions) - used_functions - rule_names

    # =========================================================================
    # 3. DEPENDENCY GRAPH
    # =========================================================================

    # source field -> fields its effects touch
    graph: Dict[str, List[str]] = defaultdict(list)
    for dep in dependencies:
        for effect in dep.effects:
            graph[dep.source_field_id].append(effect.target_field_id)

    visited: Set[str] = set()
    for node in list(graph.keys()):
        if node not in visited:
            cycle = _find_cycles_dfs(graph, node, visited, set(), [])
            if cycle:
                report.has_cycles = True
                report.cycle_example = cycle
                break

    # =========================================================================
    # 4. FLAGS
    # =========================================================================

    for fid, problems in report.invalid_fields.items():
        for problem in problems:
            report.add_error(problem)

    if report.duplicate_field_ids:
        report.add_error(
            f"Duplicate field ids: {', '.join(sorted(report.duplicate_field_ids))}"
        )

    if report.undefined_field_references:
        report.add_error(
            f"Undefined field references: {', '.join(sorted(report.undefined_field_references))}"
        )

    if report.undefined_functions:
        report.add_error(
            f"Undefined functions: {', '.join(sorted(report.undefined_functions))}"
        )

    if report.unused_functions:
        report.add_warning(
            f"Unused functions: {', '.join(sorted(report.unused_functions))}"
        )

    if report.has_cycles:
        report.add_warning(
            f"Dependency cycle detected: {' -> '.join(report.cycle_example)}"
        )

    if report.max_condition_depth > 5:
        report.add_warning(
            f"High condition complexity: max depth {report.max_condition_depth}"
        )

    return report
