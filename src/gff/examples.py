"""
Example form builders.

Small, realistic forms assembled only through the public builder and
mutation API: a contact form, an event registration form with
conditional dependencies, and a set of registration modules meant to be
merged (two of them share an identical `email` field).
"""
from typing import List

from gff.dependencies import (
    create_compound_condition,
    create_condition,
    create_datasource_function,
    create_dependency,
    require_effect,
    show_effect,
)
from gff.fields import (
    create_checkbox_field,
    create_date_field,
    create_email_field,
    create_file_field,
    create_hidden_field,
    create_options,
    create_select_field,
    create_tel_field,
    create_text_field,
    create_textarea_field,
)
from gff.form import add_dependency, add_field, add_function, create_form
from gff.model import FormDefinition, LayoutConfig, WidthConfig


def build_contact_form() -> FormDefinition:
    form = create_form(
        "contact-form",
        title="Contact Us",
        description="Send us a message and we'll get back to you",
        metadata={"author": "Support Team", "category": "contact"},
    )

    half = LayoutConfig(width=WidthConfig(mobile="full", desktop="1/2"))

    form = add_field(form, create_text_field(
        "firstName", "First Name", {"min_length": 1, "max_length": 50},
        required=True, layout=half,
    ))
    form = add_field(form, create_text_field(
        "lastName", "Last Name", {"min_length": 1, "max_length": 50},
        required=True, layout=half,
    ))
    form = add_field(form, create_email_field(
        "email", "Email Address", {"required": True},
        placeholder="you@example.com",
    ))
    form = add_field(form, create_tel_field("phone", "Phone Number", {"country_code": "+1"}))
    form = add_field(form, create_select_field("subject", "Subject", {
        "required": True,
        "options_function": "getSubjects",
    }))
    form = add_field(form, create_textarea_field("message", "Message", {
        "min_length": 10,
        "max_length": 1000,
        "rows": 6,
    }, required=True))
    form = add_field(form, create_hidden_field("source", {"value": "website"}))

    form = add_function(form, "getSubjects", create_datasource_function("Loads the list of contact subjects"))
    return form


def build_event_registration_form() -> FormDefinition:
    """Fields shown and required depending on how the attendee will attend."""
    form = create_form(
        "event-registration",
        title="Event Registration",
        description="Register for our upcoming conference",
    )

    form = add_field(form, create_select_field("attendanceType", "How will you attend?", {
        "required": True,
        "options": create_options([
            {"value": "in-person", "label": "In-Person"},
            {"value": "virtual", "label": "Virtual"},
            {"value": "hybrid", "label": "Both In-Person and Virtual"},
        ]),
    }))
    form = add_field(form, create_text_field("dietaryRestrictions", "Dietary Restrictions", {
        "max_length": 200,
        "placeholder": "e.g., Vegetarian, Gluten-free, None",
    }))
    form = add_field(form, create_checkbox_field("needsAccommodation", "I need hotel accommodation"))
    form = add_field(form, create_date_field("checkInDate", "Check-in Date", {
        "min_date": "2025-01-01",
        "max_date": "2025-12-31",
    }))
    form = add_field(form, create_date_field("checkOutDate", "Check-out Date", {
        "min_date": "2025-01-01",
        "max_date": "2025-12-31",
    }))
    form = add_field(form, create_select_field("timezone", "Your Timezone", {
        "options": create_options(["EST", "CST", "MST", "PST", "UTC"]),
    }))
    form = add_field(form, create_checkbox_field("wantToPresent", "I want to submit a presentation"))
    form = add_field(form, create_text_field("presentationTitle", "Presentation Title", {
        "min_length": 10,
        "max_length": 100,
    }))
    form = add_field(form, create_file_field("presentationSlides", "Upload Slides (Optional)", {
        "multiple": False,
        "max_size": 10485760,  # 10MB
        "accepted_types": [".pdf", ".pptx", ".key"],
    }))

    form = add_dependency(form, create_dependency(
        "attendanceType",
        create_compound_condition("or", [
            create_condition("equals", "in-person"),
            create_condition("equals", "hybrid"),
        ]),
        [
            show_effect("dietaryRestrictions"),
            show_effect("needsAccommodation"),
            require_effect("dietaryRestrictions"),
        ],
        id="in-person-fields",
    ))
    form = add_dependency(form, create_dependency(
        "needsAccommodation",
        create_condition("equals", True),
        [
            show_effect("checkInDate"),
            show_effect("checkOutDate"),
            require_effect("checkInDate"),
            require_effect("checkOutDate"),
        ],
        id="hotel-dates",
    ))
    form = add_dependency(form, create_dependency(
        "attendanceType",
        create_compound_condition("or", [
            create_condition("equals", "virtual"),
            create_condition("equals", "hybrid"),
        ]),
        [show_effect("timezone"), require_effect("timezone")],
        id="virtual-fields",
    ))
    form = add_dependency(form, create_dependency(
        "wantToPresent",
        create_condition("equals", True),
        [
            show_effect("presentationTitle"),
            show_effect("presentationSlides"),
            require_effect("presentationTitle"),
        ],
        id="presentation-fields",
    ))
    return form


def build_registration_modules() -> List[FormDefinition]:
    """Personal, account and preferences modules; personal and account share `email`."""
    personal = create_form("personal")
    personal = add_field(personal, create_text_field("firstName", "First Name", {"min_length": 1}))
    personal = add_field(personal, create_text_field("lastName", "Last Name", {"min_length": 1}))
    personal = add_field(personal, create_email_field("email", "Email", {"required": True}))

    account = create_form("account", metadata={"section": "account"})
    account = add_field(account, create_text_field("username", "Username", {
        "min_length": 3,
        "max_length": 20,
        "pattern": "^[a-zA-Z0-9_]+$",
    }))
    account = add_field(account, create_email_field("email", "Email", {"required": True}))

    preferences = create_form("preferences", metadata={"section": "preferences"})
    preferences = add_field(preferences, create_select_field("language", "Language", {
        "required": True,
        "options": create_options(["English", "Spanish", "French", "German"]),
    }))
    preferences = add_field(preferences, create_checkbox_field("newsletter", "Subscribe to newsletter"))

    return [personal, account, preferences]
