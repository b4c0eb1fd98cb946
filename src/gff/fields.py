"""
Field builders: one constructor per field type.

Every builder has the shape

    create_<type>_field(id, caption, params=None, **options) -> Field

`params` is either the type's params dataclass or a mapping of its
snake_case attribute names. Builder-owned defaults are merged underneath
the caller's params (the caller wins on collision). `options` are the
shared optional Field attributes (tooltip, layout, required, ...).

Builders never modify their inputs. A failed required-parameter check is
raised as FormCreationError through the error channel.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Union

from gff.errors import raise_form_creation_error
from gff.model import PARAMS_BY_TYPE, Field, FieldType
from gff.params import (
    Option,
    FieldParams,
    TextParams,
    TextareaParams,
    NumberParams,
    CheckboxParams,
    RadioParams,
    SelectParams,
    DateParams,
    TimeParams,
    DateTimeParams,
    FileParams,
    EmailParams,
    URLParams,
    TelParams,
    PasswordParams,
    RangeParams,
    ColorParams,
    NestedParams,
    HiddenParams,
    RatingParams,
    ToggleParams,
    TagsParams,
    AutocompleteParams,
    SliderParams,
    SignatureParams,
    RichtextParams,
    CodeParams,
    CurrencyParams,
    ImageParams,
    OTPParams,
)


ParamsInput = Union[FieldParams, Mapping, None]

RATING_DEFAULTS = {
    "max": 5,
    "min": 0,
    "step": 1,
    "icon": "star",
    "allow_half": False,
    "allow_clear": True,
}

TAGS_DEFAULTS = {
    "allow_custom": True,
    "separator": ",",
}

AUTOCOMPLETE_DEFAULTS = {
    "min_chars": 1,
    "max_results": 10,
    "allow_custom": False,
    "case_sensitive": False,
}

SLIDER_DEFAULTS = {
    "step": 1,
    "show_value": True,
    "show_ticks": False,
    "vertical": False,
    "range": False,
}

SIGNATURE_DEFAULTS = {
    "width": 400,
    "height": 200,
    "pen_color": "#000000",
    "background_color": "#ffffff",
    "format": "png",
}

RICHTEXT_DEFAULTS = {
    "toolbar": ["bold", "italic", "underline", "link", "bulletList", "numberedList"],
    "allow_images": False,
    "allow_links": True,
    "allow_tables": False,
}

CODE_DEFAULTS = {
    "language": "javascript",
    "theme": "light",
    "line_numbers": True,
    "read_only": False,
}

CURRENCY_DEFAULTS = {
    "currency": "USD",
    "locale": "en-US",
    "precision": 2,
    "allow_negative": False,
}

IMAGE_DEFAULTS = {
    "max_size": 5242880,  # 5MB
    "accepted_formats": [".jpg", ".jpeg", ".png", ".gif", ".webp"],
    "multiple": False,
    "preview": True,
    "allow_crop": False,
    "allow_resize": False,
}

OTP_DEFAULTS = {
    "length": 6,
    "type": "numeric",
    "mask": False,
    "auto_submit": False,
}

_HIDDEN_EXCLUDED_OPTIONS = ("tooltip", "layout")


def _params_values(params: ParamsInput) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, Mapping):
        return dict(params)
    # A params dataclass: unset (None) attributes do not override defaults
    return {
        f.name: getattr(params, f.name)
        for f in dataclasses.fields(params)
        if getattr(params, f.name) is not None
    }


def _merged(defaults: Optional[Dict[str, Any]], params: ParamsInput) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, value in (defaults or {}).items():
        # lists are copied so fields never share a mutable default
        values[key] = list(value) if isinstance(value, list) else value
    values.update(_params_values(params))
    return values


def _build(field_type: FieldType, id: str, caption: str, values: Dict[str, Any], options: Dict[str, Any]) -> Field:
    params_cls = PARAMS_BY_TYPE[field_type]
    return Field(id=id, type=field_type, caption=caption, params=params_cls(**values), **options)


def _require_options(label: str, values: Dict[str, Any]) -> None:
    if values.get("options") is None and not values.get("options_function"):
        raise_form_creation_error(f"{label} field must have either options or optionsFunction")


def create_text_field(id: str, caption: str, params: Union[TextParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.TEXT, id, caption, _merged(None, params), options)


def create_textarea_field(id: str, caption: str, params: Union[TextareaParams, Mapping, None] = None, **options: Any) -> Field:
    """Multi-line text."""
    return _build(FieldType.TEXTAREA, id, caption, _merged(None, params), options)


def create_number_field(id: str, caption: str, params: Union[NumberParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.NUMBER, id, caption, _merged(None, params), options)


def create_checkbox_field(id: str, caption: str, params: Union[CheckboxParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.CHECKBOX, id, caption, _merged(None, params), options)


def create_radio_field(id: str, caption: str, params: Union[RadioParams, Mapping, None] = None, **options: Any) -> Field:
    """Requires `options` or `options_function`."""
    values = _merged(None, params)
    _require_options("Radio", values)
    return _build(FieldType.RADIO, id, caption, values, options)


def create_select_field(id: str, caption: str, params: Union[SelectParams, Mapping, None] = None, **options: Any) -> Field:
    """Requires `options` or `options_function`."""
    values = _merged(None, params)
    _require_options("Select", values)
    return _build(FieldType.SELECT, id, caption, values, options)


def create_date_field(id: str, caption: str, params: Union[DateParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.DATE, id, caption, _merged(None, params), options)


def create_time_field(id: str, caption: str, params: Union[TimeParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.TIME, id, caption, _merged(None, params), options)


def create_datetime_field(id: str, caption: str, params: Union[DateTimeParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.DATETIME, id, caption, _merged(None, params), options)


def create_file_field(id: str, caption: str, params: Union[FileParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.FILE, id, caption, _merged(None, params), options)


def create_email_field(id: str, caption: str, params: Union[EmailParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.EMAIL, id, caption, _merged(None, params), options)


def create_url_field(id: str, caption: str, params: Union[URLParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.URL, id, caption, _merged(None, params), options)


def create_tel_field(id: str, caption: str, params: Union[TelParams, Mapping, None] = None, **options: Any) -> Field:
    """Telephone number input."""
    return _build(FieldType.TEL, id, caption, _merged(None, params), options)


def create_password_field(id: str, caption: str, params: Union[PasswordParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.PASSWORD, id, caption, _merged(None, params), options)


def create_range_field(id: str, caption: str, params: Union[RangeParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.RANGE, id, caption, _merged(None, params), options)


def create_color_field(id: str, caption: str, params: Union[ColorParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.COLOR, id, caption, _merged(None, params), options)


def create_nested_field(id: str, caption: str, params: Union[NestedParams, Mapping, None] = None, **options: Any) -> Field:
    """Embeds another form by id; requires `form_id`."""
    values = _merged(None, params)
    if not values.get("form_id"):
        raise_form_creation_error("Nested field must have a formId")
    return _build(FieldType.NESTED, id, caption, values, options)


def create_hidden_field(id: str, params: Union[HiddenParams, Mapping, None] = None, **options: Any) -> Field:
    """
    Hidden fields have no caption; the caption is always "".

    Caption-related options (tooltip, layout) are not accepted.
    """
    rejected = [name for name in _HIDDEN_EXCLUDED_OPTIONS if name in options]
    if rejected:
        raise_form_creation_error(f"Hidden field does not accept {', '.join(rejected)}")
    return _build(FieldType.HIDDEN, id, "", _merged(None, params), options)


def create_rating_field(id: str, caption: str, params: Union[RatingParams, Mapping, None] = None, **options: Any) -> Field:
    """Stars, hearts, thumbs or numbers; defaults to 0-5 stars."""
    return _build(FieldType.RATING, id, caption, _merged(RATING_DEFAULTS, params), options)


def create_toggle_field(id: str, caption: str, params: Union[ToggleParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.TOGGLE, id, caption, _merged(None, params), options)


def create_tags_field(id: str, caption: str, params: Union[TagsParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.TAGS, id, caption, _merged(TAGS_DEFAULTS, params), options)


def create_autocomplete_field(id: str, caption: str, params: Union[AutocompleteParams, Mapping, None] = None, **options: Any) -> Field:
    """Requires `options` or `options_function`."""
    values = _merged(AUTOCOMPLETE_DEFAULTS, params)
    _require_options("Autocomplete", values)
    return _build(FieldType.AUTOCOMPLETE, id, caption, values, options)


def create_slider_field(id: str, caption: str, params: Union[SliderParams, Mapping, None] = None, **options: Any) -> Field:
    """Requires both `min` and `max`."""
    values = _merged(SLIDER_DEFAULTS, params)
    if values.get("min") is None or values.get("max") is None:
        raise_form_creation_error("Slider field must have min and max values")
    return _build(FieldType.SLIDER, id, caption, values, options)


def create_signature_field(id: str, caption: str, params: Union[SignatureParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.SIGNATURE, id, caption, _merged(SIGNATURE_DEFAULTS, params), options)


def create_richtext_field(id: str, caption: str, params: Union[RichtextParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.RICHTEXT, id, caption, _merged(RICHTEXT_DEFAULTS, params), options)


def create_code_field(id: str, caption: str, params: Union[CodeParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.CODE, id, caption, _merged(CODE_DEFAULTS, params), options)


def create_currency_field(id: str, caption: str, params: Union[CurrencyParams, Mapping, None] = None, **options: Any) -> Field:
    return _build(FieldType.CURRENCY, id, caption, _merged(CURRENCY_DEFAULTS, params), options)


def create_image_field(id: str, caption: str, params: Union[ImageParams, Mapping, None] = None, **options: Any) -> Field:
    """Image upload with preview."""
    return _build(FieldType.IMAGE, id, caption, _merged(IMAGE_DEFAULTS, params), options)


def create_otp_field(id: str, caption: str, params: Union[OTPParams, Mapping, None] = None, **options: Any) -> Field:
    """One-time password / verification code input."""
    return _build(FieldType.OTP, id, caption, _merged(OTP_DEFAULTS, params), options)


def create_option(value: Union[str, int, float], label: str) -> Option:
    return Option(value=value, label=label)


def create_options(items: Iterable[Union[str, Option, Mapping]]) -> List[Option]:
    """
    Build options from plain strings (value == label), Option objects
    or {"value": ..., "label": ...} mappings.
    """
    result: List[Option] = []
    for item in items:
        if isinstance(item, str):
            result.append(Option(value=item, label=item))
        elif isinstance(item, Mapping):
            result.append(Option(value=item["value"], label=item["label"]))
        else:
            result.append(item)
    return result
