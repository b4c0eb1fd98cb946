"""
Type-specific field parameters.

Each FieldType has exactly one params dataclass; the tag -> payload
registry is `gff.model.PARAMS_BY_TYPE`.

Every attribute defaults to None, meaning "absent". Builder-owned defaults
(e.g. a rating field's max=5) are applied by the builders in `gff.fields`,
not here, so decoding a document never invents values it did not contain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union


@dataclass
class Option:
    """A value/label pair for select, radio and autocomplete fields."""

    value: Union[str, int, float]
    label: str


OptionList = List[Union[str, Option]]


class FieldParams:
    """Marker base class for params payloads."""
    pass


@dataclass
class TextParams(FieldParams):
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    multiline: Optional[bool] = None
    rtl: Optional[bool] = None
    pattern: Optional[str] = None
    placeholder: Optional[str] = None


@dataclass
class TextareaParams(FieldParams):
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    rows: Optional[int] = None
    cols: Optional[int] = None
    rtl: Optional[bool] = None
    placeholder: Optional[str] = None
    resize: Optional[str] = None  # none | both | horizontal | vertical
    required: Optional[bool] = None


@dataclass
class NumberParams(FieldParams):
    required: Optional[bool] = None
    min: Optional[float] = None
    max: Optional[float] = None
    decimals: Optional[int] = None
    step: Optional[float] = None


@dataclass
class CheckboxParams(FieldParams):
    required: Optional[bool] = None
    checked: Optional[bool] = None


@dataclass
class RadioParams(FieldParams):
    required: Optional[bool] = None
    options: Optional[OptionList] = None
    options_function: Optional[str] = None


@dataclass
class SelectParams(FieldParams):
    required: Optional[bool] = None
    multiple: Optional[bool] = None
    options: Optional[OptionList] = None
    options_function: Optional[str] = None
    searchable: Optional[bool] = None
    placeholder: Optional[str] = None


@dataclass
class DateParams(FieldParams):
    required: Optional[bool] = None
    include_time: Optional[bool] = None
    min_date: Optional[str] = None
    max_date: Optional[str] = None
    format: Optional[str] = None


@dataclass
class TimeParams(FieldParams):
    required: Optional[bool] = None
    min_time: Optional[str] = None
    max_time: Optional[str] = None
    step: Optional[int] = None
    format: Optional[str] = None  # 12h | 24h
    placeholder: Optional[str] = None


@dataclass
class DateTimeParams(FieldParams):
    required: Optional[bool] = None
    min_date_time: Optional[str] = None
    max_date_time: Optional[str] = None
    date_format: Optional[str] = None
    time_format: Optional[str] = None
    placeholder: Optional[str] = None


@dataclass
class FileParams(FieldParams):
    required: Optional[bool] = None
    multiple: Optional[bool] = None
    max_size: Optional[int] = None
    accepted_types: Optional[List[str]] = None
    accepted_mime_types: Optional[List[str]] = None


@dataclass
class EmailParams(FieldParams):
    required: Optional[bool] = None
    multiple: Optional[bool] = None
    placeholder: Optional[str] = None
    domain: Optional[str] = None


@dataclass
class URLParams(FieldParams):
    required: Optional[bool] = None
    placeholder: Optional[str] = None


@dataclass
class TelParams(FieldParams):
    required: Optional[bool] = None
    pattern: Optional[str] = None
    placeholder: Optional[str] = None
    country_code: Optional[str] = None
    format: Optional[str] = None


@dataclass
class PasswordParams(FieldParams):
    required: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    require_uppercase: Optional[bool] = None
    require_lowercase: Optional[bool] = None
    require_number: Optional[bool] = None
    require_symbol: Optional[bool] = None


@dataclass
class RangeParams(FieldParams):
    required: Optional[bool] = None
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    default_value: Optional[float] = None


@dataclass
class ColorParams(FieldParams):
    required: Optional[bool] = None
    format: Optional[str] = None  # hex | rgb | rgba | hsl
    default_value: Optional[str] = None


@dataclass
class NestedParams(FieldParams):
    form_id: Optional[str] = None
    multiple: Optional[bool] = None
    collapsible: Optional[bool] = None
    default_expanded: Optional[bool] = None


@dataclass
class HiddenParams(FieldParams):
    value: Any = None


@dataclass
class RatingParams(FieldParams):
    required: Optional[bool] = None
    max: Optional[float] = None
    min: Optional[float] = None
    step: Optional[float] = None
    icon: Optional[str] = None  # star | heart | thumb | number
    allow_half: Optional[bool] = None
    allow_clear: Optional[bool] = None


@dataclass
class ToggleParams(FieldParams):
    required: Optional[bool] = None
    on_label: Optional[str] = None
    off_label: Optional[str] = None
    default_value: Optional[bool] = None


@dataclass
class TagsParams(FieldParams):
    required: Optional[bool] = None
    max_tags: Optional[int] = None
    allow_custom: Optional[bool] = None
    suggestions: Optional[List[str]] = None
    placeholder: Optional[str] = None
    separator: Optional[str] = None


@dataclass
class AutocompleteParams(FieldParams):
    required: Optional[bool] = None
    options: Optional[OptionList] = None
    options_function: Optional[str] = None
    min_chars: Optional[int] = None
    max_results: Optional[int] = None
    placeholder: Optional[str] = None
    allow_custom: Optional[bool] = None
    case_sensitive: Optional[bool] = None
    debounce: Optional[int] = None


@dataclass
class SliderParams(FieldParams):
    required: Optional[bool] = None
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    default_value: Optional[float] = None
    show_value: Optional[bool] = None
    show_ticks: Optional[bool] = None
    # JSON object keys are strings, so tick positions are string keys
    marks: Optional[Dict[str, str]] = None
    vertical: Optional[bool] = None
    range: Optional[bool] = None
    tooltip: Optional[bool] = None
    tick_labels: Optional[List[str]] = None


@dataclass
class SignatureParams(FieldParams):
    required: Optional[bool] = None
    width: Optional[int] = None
    height: Optional[int] = None
    pen_color: Optional[str] = None
    background_color: Optional[str] = None
    format: Optional[str] = None  # png | jpg | svg
    max_size: Optional[int] = None
    pen_width: Optional[float] = None
    clear_button: Optional[bool] = None


@dataclass
class RichtextParams(FieldParams):
    required: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    toolbar: Optional[List[str]] = None
    allow_images: Optional[bool] = None
    allow_links: Optional[bool] = None
    allow_tables: Optional[bool] = None
    placeholder: Optional[str] = None


@dataclass
class CodeParams(FieldParams):
    required: Optional[bool] = None
    language: Optional[str] = None
    theme: Optional[str] = None
    line_numbers: Optional[bool] = None
    read_only: Optional[bool] = None
    min_lines: Optional[int] = None
    max_lines: Optional[int] = None
    placeholder: Optional[str] = None
    word_wrap: Optional[bool] = None
    minimap: Optional[bool] = None
    font_size: Optional[int] = None
    tab_size: Optional[int] = None


@dataclass
class CurrencyParams(FieldParams):
    required: Optional[bool] = None
    currency: Optional[str] = None
    locale: Optional[str] = None
    min: Optional[float] = None
    max: Optional[float] = None
    precision: Optional[int] = None
    allow_negative: Optional[bool] = None
    placeholder: Optional[str] = None
    symbol: Optional[str] = None
    symbol_position: Optional[str] = None  # prefix | suffix
    thousands_separator: Optional[str] = None
    decimal_separator: Optional[str] = None


@dataclass
class ImageParams(FieldParams):
    required: Optional[bool] = None
    max_size: Optional[int] = None
    min_width: Optional[int] = None
    min_height: Optional[int] = None
    max_width: Optional[int] = None
    max_height: Optional[int] = None
    aspect_ratio: Optional[str] = None
    allow_crop: Optional[bool] = None
    allow_resize: Optional[bool] = None
    accepted_formats: Optional[List[str]] = None
    multiple: Optional[bool] = None
    preview: Optional[bool] = None


@dataclass
class OTPParams(FieldParams):
    required: Optional[bool] = None
    length: Optional[int] = None
    type: Optional[str] = None  # numeric | alphanumeric | alphabetic
    mask: Optional[bool] = None
    auto_submit: Optional[bool] = None
    placeholder: Optional[str] = None
    separator: Optional[str] = None
    separator_interval: Optional[int] = None

