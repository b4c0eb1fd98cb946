"""
Tests for the field builders.

These tests verify:
    - Builders tag the field and pick the right params class
    - Builder defaults sit underneath caller params
    - Required parameters are enforced
    - Hidden fields never carry a caption
"""

import pytest

from gff.errors import FormCreationError
from gff.fields import (
    IMAGE_DEFAULTS,
    RICHTEXT_DEFAULTS,
    create_autocomplete_field,
    create_checkbox_field,
    create_code_field,
    create_currency_field,
    create_hidden_field,
    create_image_field,
    create_nested_field,
    create_option,
    create_options,
    create_otp_field,
    create_radio_field,
    create_rating_field,
    create_richtext_field,
    create_select_field,
    create_signature_field,
    create_slider_field,
    create_tags_field,
    create_text_field,
)
from gff.model import FieldType, LayoutConfig, WidthConfig
from gff.params import Option, RatingParams, SelectParams, TextParams


class TestBasicBuilders:
    """Test builders without defaults or required params."""

    def test_text_field(self):
        field = create_text_field("name", "Name", {"min_length": 1, "max_length": 50})
        assert field.id == "name"
        assert field.type is FieldType.TEXT
        assert field.caption == "Name"
        assert isinstance(field.params, TextParams)
        assert field.params.min_length == 1
        assert field.params.max_length == 50
        assert field.params.pattern is None

    def test_params_may_be_a_dataclass(self):
        field = create_text_field("name", "Name", TextParams(pattern="^[a-z]+$"))
        assert field.params.pattern == "^[a-z]+$"

    def test_shared_options(self):
        layout = LayoutConfig(width=WidthConfig(desktop="1/2"))
        field = create_checkbox_field(
            "terms", "Accept terms", required=True, tooltip="Read them first", layout=layout,
        )
        assert field.required is True
        assert field.tooltip == "Read them first"
        assert field.layout.width.desktop == "1/2"

    def test_unknown_option_rejected(self):
        with pytest.raises(TypeError):
            create_text_field("name", "Name", colour="red")

    def test_unknown_param_rejected(self):
        with pytest.raises(TypeError):
            create_text_field("name", "Name", {"rows": 3})

    def test_input_params_not_modified(self):
        params = {"min_length": 1}
        create_text_field("name", "Name", params)
        assert params == {"min_length": 1}


class TestDefaults:
    """Builder-owned defaults."""

    def test_rating_defaults(self):
        params = create_rating_field("score", "Score").params
        assert params.max == 5
        assert params.min == 0
        assert params.step == 1
        assert params.icon == "star"
        assert params.allow_half is False
        assert params.allow_clear is True

    def test_caller_wins_over_defaults(self):
        params = create_rating_field("score", "Score", {"max": 10, "icon": "heart"}).params
        assert params.max == 10
        assert params.icon == "heart"
        assert params.min == 0

    def test_dataclass_params_keep_unset_defaults(self):
        params = create_rating_field("score", "Score", RatingParams(allow_half=True)).params
        assert params.allow_half is True
        assert params.max == 5

    def test_slider_defaults(self):
        params = create_slider_field("volume", "Volume", {"min": 0, "max": 100}).params
        assert params.step == 1
        assert params.show_value is True
        assert params.show_ticks is False
        assert params.vertical is False
        assert params.range is False

    def test_tags_defaults(self):
        params = create_tags_field("tags", "Tags").params
        assert params.allow_custom is True
        assert params.separator == ","

    def test_autocomplete_defaults(self):
        params = create_autocomplete_field("city", "City", {"options_function": "getCities"}).params
        assert params.min_chars == 1
        assert params.max_results == 10
        assert params.allow_custom is False
        assert params.case_sensitive is False

    def test_signature_defaults(self):
        params = create_signature_field("sig", "Signature").params
        assert (params.width, params.height) == (400, 200)
        assert params.pen_color == "#000000"
        assert params.background_color == "#ffffff"
        assert params.format == "png"

    def test_richtext_defaults(self):
        params = create_richtext_field("bio", "Bio").params
        assert params.toolbar == RICHTEXT_DEFAULTS["toolbar"]
        assert params.allow_links is True

    def test_code_defaults(self):
        params = create_code_field("snippet", "Snippet").params
        assert params.language == "javascript"
        assert params.line_numbers is True

    def test_currency_defaults(self):
        params = create_currency_field("amount", "Amount").params
        assert params.currency == "USD"
        assert params.locale == "en-US"
        assert params.precision == 2
        assert params.allow_negative is False

    def test_image_defaults(self):
        params = create_image_field("avatar", "Avatar").params
        assert params.max_size == 5242880
        assert params.accepted_formats == IMAGE_DEFAULTS["accepted_formats"]
        assert params.preview is True

    def test_otp_defaults(self):
        params = create_otp_field("code", "Code").params
        assert params.length == 6
        assert params.type == "numeric"

    def test_list_defaults_are_not_shared(self):
        a = create_image_field("a", "A")
        b = create_image_field("b", "B")
        a.params.accepted_formats.append(".bmp")
        assert ".bmp" not in b.params.accepted_formats
        assert ".bmp" not in IMAGE_DEFAULTS["accepted_formats"]


class TestRequiredParams:
    """Builders that refuse incomplete params."""

    @pytest.mark.parametrize("builder", [
        create_radio_field,
        create_select_field,
        create_autocomplete_field,
    ])
    def test_choice_fields_need_options(self, builder):
        with pytest.raises(FormCreationError, match="options or optionsFunction"):
            builder("choice", "Choice")

    def test_empty_options_list_is_enough(self):
        field = create_select_field("choice", "Choice", {"options": []})
        assert field.params.options == []

    def test_options_function_is_enough(self):
        field = create_radio_field("choice", "Choice", {"options_function": "getChoices"})
        assert field.params.options_function == "getChoices"

    def test_select_with_dataclass_params(self):
        field = create_select_field("c", "C", SelectParams(options=["a", "b"], multiple=True))
        assert field.params.multiple is True

    def test_slider_needs_min_and_max(self):
        with pytest.raises(FormCreationError, match="min and max"):
            create_slider_field("volume", "Volume", {"min": 0})
        with pytest.raises(FormCreationError):
            create_slider_field("volume", "Volume", {"max": 10})

    def test_slider_accepts_zero_bounds(self):
        field = create_slider_field("temp", "Temp", {"min": -10, "max": 0})
        assert field.params.max == 0

    def test_nested_needs_form_id(self):
        with pytest.raises(FormCreationError, match="formId"):
            create_nested_field("address", "Address")
        field = create_nested_field("address", "Address", {"form_id": "address-form"})
        assert field.params.form_id == "address-form"


class TestHiddenField:

    def test_caption_is_empty(self):
        field = create_hidden_field("source", {"value": "website"})
        assert field.type is FieldType.HIDDEN
        assert field.caption == ""
        assert field.params.value == "website"

    def test_rejects_tooltip_and_layout(self):
        with pytest.raises(FormCreationError):
            create_hidden_field("source", tooltip="never shown")
        with pytest.raises(FormCreationError):
            create_hidden_field("source", layout=LayoutConfig(order=1))

    def test_caption_cannot_be_passed(self):
        with pytest.raises(TypeError):
            create_hidden_field("source", caption="Source")


class TestOptions:

    def test_create_option(self):
        assert create_option("us", "United States") == Option(value="us", label="United States")

    def test_create_options_from_mixed_items(self):
        options = create_options([
            "red",
            {"value": "gr", "label": "Green"},
            Option(value=3, label="Three"),
        ])
        assert options == [
            Option(value="red", label="red"),
            Option(value="gr", label="Green"),
            Option(value=3, label="Three"),
        ]
