"""
Demo: Build the example forms, merge the registration modules, analyze
everything and print the results.
"""

from gff.analyzer import analyze_form
from gff.errors import DuplicateFieldError
from gff.examples import build_contact_form, build_event_registration_form, build_registration_modules
from gff.fields import create_number_field
from gff.form import add_field, create_form
from gff.merge import merge_forms
from gff.serialization import to_json, to_yaml


def print_report(report):
    """Pretty-print a FormReport."""
    print()
    print("=" * 70)
    print(f"FORM ANALYSIS REPORT: {report.form_id}")
    print("=" * 70)
    print(f"  Fields:          {report.total_fields}")
    print(f"  Dependencies:    {report.total_dependencies}")
    print(f"  Functions:       {report.total_functions}")
    print(f"  Field types:     {report.field_type_counts}")
    print(f"  Condition depth: {report.max_condition_depth}")
    print(f"  Has cycles:      {'YES' if report.has_cycles else 'NO'}")
    for error in report.errors:
        print(f"  error:   {error}")
    for warning in report.warnings:
        print(f"  warning: {warning}")
    if report.is_valid and not report.warnings:
        print("  Form looks clean!")
    print()


if __name__ == "__main__":
    contact = build_contact_form()
    event = build_event_registration_form()

    print_report(analyze_form(contact))
    print_report(analyze_form(event))

    registration = merge_forms(
        build_registration_modules(),
        form_id="user-registration",
        title="User Registration",
    )
    print("Merged fields:", ", ".join(f"{f.id} ({f.type.value})" for f in registration.fields))
    print(to_json(registration))

    # Same id, different params: cannot be merged
    form_a = add_field(create_form("formA"), create_number_field("age", "Age", {"min": 18, "max": 120}))
    form_b = add_field(create_form("formB"), create_number_field("age", "Age", {"min": 21, "max": 100}))
    try:
        merge_forms([form_a, form_b])
    except DuplicateFieldError as e:
        print("Merge failed as expected:", e)

    with open("event_registration.yaml", "w") as f:
        f.write(to_yaml(event))
    print("Event form exported to event_registration.yaml")
