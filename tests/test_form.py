"""
Tests for the form mutation API.

These tests verify:
    - Form creation and header defaults
    - Field identity (idempotent add, duplicate detection)
    - Update and removal of fields, dependencies and functions
    - Inputs are never modified
"""

import pytest

from gff.dependencies import (
    create_condition,
    create_datasource_function,
    create_dependency,
    create_validator_function,
    show_effect,
)
from gff.errors import DuplicateFieldError, FormCreationError
from gff.fields import create_email_field, create_hidden_field, create_text_field
from gff.form import (
    add_dependency,
    add_field,
    add_function,
    create_form,
    fields_equal,
    get_field,
    remove_dependency,
    remove_field,
    remove_function,
    update_field,
)
from gff.model import Field, FieldType
from gff.params import HiddenParams, TextParams


@pytest.fixture
def contact_form():
    form = create_form("contact", title="Contact")
    form = add_field(form, create_text_field("name", "Name", {"min_length": 1}))
    form = add_field(form, create_email_field("email", "Email", {"required": True}))
    return form


class TestCreateForm:
    """Test form creation."""

    def test_defaults(self):
        form = create_form("test")
        assert form.form_id == "test"
        assert form.version == "1.0"
        assert form.fields == []
        assert form.dependencies == []
        assert form.functions == {}
        assert form.title is None
        assert form.metadata is None

    def test_header(self):
        form = create_form("test", title="T", description="D", version="2.0", metadata={"a": 1})
        assert (form.title, form.description, form.version) == ("T", "D", "2.0")
        assert form.metadata == {"a": 1}

    @pytest.mark.parametrize("form_id", ["", None, 42])
    def test_invalid_form_id(self, form_id):
        with pytest.raises(FormCreationError, match="formId must be a non-empty string"):
            create_form(form_id)


class TestAddField:
    """Test the field identity rule."""

    def test_add_returns_new_form(self):
        form = create_form("test")
        updated = add_field(form, create_text_field("name", "Name"))
        assert form.fields == []
        assert updated.field_ids() == ["name"]

    def test_add_identical_field_is_noop(self, contact_form):
        again = add_field(contact_form, create_text_field("name", "Name", {"min_length": 1}))
        assert again.field_ids() == ["name", "email"]

    def test_add_different_field_with_same_id(self, contact_form):
        with pytest.raises(DuplicateFieldError) as exc_info:
            add_field(contact_form, create_text_field("name", "Name", {"min_length": 2}))
        assert exc_info.value.field_id == "name"
        assert "A different field with this ID already exists" in str(exc_info.value)

    def test_absent_attribute_differs_from_set_attribute(self, contact_form):
        with pytest.raises(DuplicateFieldError):
            add_field(contact_form, create_text_field("name", "Name", {"min_length": 1}, required=False))

    def test_field_without_id(self):
        with pytest.raises(FormCreationError, match="id"):
            add_field(create_form("t"), Field(id="", type=FieldType.TEXT, caption="X", params=TextParams()))

    def test_field_without_type(self):
        with pytest.raises(FormCreationError, match="type"):
            add_field(create_form("t"), Field(id="x", type=None, caption="X", params=TextParams()))

    def test_field_without_caption(self):
        with pytest.raises(FormCreationError, match="caption"):
            add_field(create_form("t"), create_text_field("x", ""))

    def test_hidden_field_needs_no_caption(self):
        form = add_field(create_form("t"), create_hidden_field("token"))
        assert form.get_field("token").caption == ""

    def test_hidden_type_given_as_string(self):
        field = Field(id="h", type="hidden", caption="", params=HiddenParams())
        form = add_field(create_form("t"), field)
        assert form.field_ids() == ["h"]

    def test_unknown_type_string(self):
        with pytest.raises(FormCreationError, match="Unknown field type"):
            add_field(create_form("t"), Field(id="x", type="hologram", caption="X", params=TextParams()))


class TestFieldAccess:

    def test_get_field(self, contact_form):
        assert get_field(contact_form, "email").type is FieldType.EMAIL
        assert get_field(contact_form, "missing") is None

    def test_fields_equal(self):
        assert fields_equal(create_text_field("a", "A"), create_text_field("a", "A"))
        assert not fields_equal(create_text_field("a", "A"), create_text_field("a", "B"))

    def test_remove_field(self, contact_form):
        form = remove_field(contact_form, "name")
        assert form.field_ids() == ["email"]
        assert contact_form.field_ids() == ["name", "email"]

    def test_remove_missing_field_is_noop(self, contact_form):
        assert remove_field(contact_form, "missing").field_ids() == ["name", "email"]


class TestUpdateField:

    def test_update_keeps_position(self, contact_form):
        form = update_field(contact_form, "name", caption="Full Name", required=True)
        assert form.field_ids() == ["name", "email"]
        assert form.get_field("name").caption == "Full Name"
        assert form.get_field("name").required is True
        assert contact_form.get_field("name").caption == "Name"

    def test_update_params(self, contact_form):
        form = update_field(contact_form, "name", params=TextParams(min_length=3))
        assert form.get_field("name").params.min_length == 3

    def test_update_missing_field(self, contact_form):
        with pytest.raises(FormCreationError, match='Field with ID "missing" not found'):
            update_field(contact_form, "missing", caption="X")

    def test_update_cannot_change_id(self, contact_form):
        with pytest.raises(FormCreationError):
            update_field(contact_form, "name", id="fullName")

    def test_update_unknown_attribute(self, contact_form):
        with pytest.raises(TypeError):
            update_field(contact_form, "name", colour="red")


class TestDependencies:

    def test_add_and_remove(self, contact_form):
        dep = create_dependency("name", create_condition("isNotEmpty"), [show_effect("email")], id="d1")
        form = add_dependency(contact_form, dep)
        assert form.dependencies == [dep]
        assert contact_form.dependencies == []

        form = remove_dependency(form, "d1")
        assert form.dependencies == []

    def test_add_does_not_deduplicate(self, contact_form):
        dep = create_dependency("name", create_condition("isNotEmpty"), [show_effect("email")], id="d1")
        form = add_dependency(add_dependency(contact_form, dep), dep)
        assert len(form.dependencies) == 2

    def test_remove_keeps_dependencies_without_id(self, contact_form):
        anonymous = create_dependency("name", create_condition("isEmpty"), [show_effect("email")])
        named = create_dependency("name", create_condition("isNotEmpty"), [show_effect("email")], id="d1")
        form = add_dependency(add_dependency(contact_form, anonymous), named)

        form = remove_dependency(form, "d1")
        assert form.dependencies == [anonymous]


class TestFunctions:

    def test_add_replaces_same_name(self, contact_form):
        form = add_function(contact_form, "check", create_validator_function("v1"))
        form = add_function(form, "check", create_validator_function("v2"))
        assert list(form.functions) == ["check"]
        assert form.functions["check"].description == "v2"

    def test_remove_function(self, contact_form):
        form = add_function(contact_form, "getCountries", create_datasource_function())
        form = remove_function(form, "getCountries")
        assert form.functions == {}

    def test_remove_missing_function_is_noop(self, contact_form):
        assert remove_function(contact_form, "missing").functions == {}
