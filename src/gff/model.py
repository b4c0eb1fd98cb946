"""
Core Form Model Objects

Defines the data structures of a Generic Form Format (GFF) document:
    - Fields (typed inputs, one params payload per field type)
    - Function definitions (declared external capabilities)
    - Presentation config (settings, steps, groups, theme, i18n)
    - FormDefinition (root container)

Reactive rules (dependencies, conditions, effects) live in `gff.conditions`.

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about rendering
        - Are immutable by convention (mutations build new objects)
        - Are fully serializable
        - Represent structure, not behavior
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from gff.conditions import Dependency
from gff.params import (
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


class FieldType(Enum):
    """The fixed set of field variants."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    FILE = "file"
    EMAIL = "email"
    URL = "url"
    TEL = "tel"
    PASSWORD = "password"
    RANGE = "range"
    COLOR = "color"
    NESTED = "nested"
    HIDDEN = "hidden"
    RATING = "rating"
    TOGGLE = "toggle"
    TAGS = "tags"
    AUTOCOMPLETE = "autocomplete"
    SLIDER = "slider"
    SIGNATURE = "signature"
    RICHTEXT = "richtext"
    CODE = "code"
    CURRENCY = "currency"
    IMAGE = "image"
    OTP = "otp"


PARAMS_BY_TYPE: Dict[FieldType, type] = {
    FieldType.TEXT: TextParams,
    FieldType.TEXTAREA: TextareaParams,
    FieldType.NUMBER: NumberParams,
    FieldType.CHECKBOX: CheckboxParams,
    FieldType.RADIO: RadioParams,
    FieldType.SELECT: SelectParams,
    FieldType.DATE: DateParams,
    FieldType.TIME: TimeParams,
    FieldType.DATETIME: DateTimeParams,
    FieldType.FILE: FileParams,
    FieldType.EMAIL: EmailParams,
    FieldType.URL: URLParams,
    FieldType.TEL: TelParams,
    FieldType.PASSWORD: PasswordParams,
    FieldType.RANGE: RangeParams,
    FieldType.COLOR: ColorParams,
    FieldType.NESTED: NestedParams,
    FieldType.HIDDEN: HiddenParams,
    FieldType.RATING: RatingParams,
    FieldType.TOGGLE: ToggleParams,
    FieldType.TAGS: TagsParams,
    FieldType.AUTOCOMPLETE: AutocompleteParams,
    FieldType.SLIDER: SliderParams,
    FieldType.SIGNATURE: SignatureParams,
    FieldType.RICHTEXT: RichtextParams,
    FieldType.CODE: CodeParams,
    FieldType.CURRENCY: CurrencyParams,
    FieldType.IMAGE: ImageParams,
    FieldType.OTP: OTPParams,
}


@dataclass
class WidthConfig:
    """Responsive widths, e.g. "full", "1/2", "3/8", "5/16"."""

    mobile: Optional[str] = None
    tablet: Optional[str] = None
    desktop: Optional[str] = None
    wide: Optional[str] = None


@dataclass
class LayoutConfig:
    width: Optional[WidthConfig] = None
    order: Optional[int] = None
    row: Optional[int] = None
    column: Optional[int] = None
    span: Optional[int] = None


@dataclass
class CustomValidation:
    rule: str
    message: str
    params: Optional[Dict[str, Any]] = None


@dataclass
class CrossFieldValidation:
    fields: List[str]
    rule: str
    message: str


@dataclass
class ValidationConfig:
    """
    Declarative validation rules attached to a field.

    `custom` and `cross_field` name rules implemented by the renderer;
    nothing here executes them.
    """

    type: Optional[str] = None
    required: Optional[bool] = None
    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    custom_message: Optional[str] = None
    custom: Optional[List[CustomValidation]] = None
    cross_field: Optional[List[CrossFieldValidation]] = None


@dataclass
class Field:
    """
    A single typed input definition.

    Properties:
        id:
            Unique identifier within a form (must be a non-empty string)

        type:
            FieldType tag; decides the concrete class of `params`

        caption:
            Label shown to the user. Empty only for hidden fields.

        params:
            Type-specific payload, an instance of PARAMS_BY_TYPE[type]

    The remaining attributes are optional presentation, accessibility
    and validation settings shared by every field type.

    INVARIANT:
        Fields are replaced whole (see `gff.form.update_field`),
        never edited in place.
    """

    id: str
    type: FieldType
    caption: str
    params: FieldParams
    tooltip: Optional[str] = None
    layout: Optional[LayoutConfig] = None
    validation: Optional[ValidationConfig] = None
    default_value: Any = None
    disabled: Optional[bool] = None
    readonly: Optional[bool] = None
    visible: Optional[bool] = None
    required: Optional[bool] = None
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    group: Optional[str] = None
    tab_index: Optional[int] = None
    autocomplete: Optional[str] = None
    aria_label: Optional[str] = None
    aria_described_by: Optional[str] = None
    data_attributes: Optional[Dict[str, str]] = None
    css_classes: Optional[List[str]] = None
    style: Optional[Dict[str, str]] = None


class FunctionType(Enum):
    DATASOURCE = "datasource"
    VALIDATOR = "validator"
    TRANSFORMER = "transformer"


@dataclass
class FunctionDef:
    """
    A named external capability a form refers to (e.g. an optionsFunction).

    This is a reference, not executable code.
    """

    type: FunctionType
    description: Optional[str] = None
    params: Optional[List[str]] = None
    returns: Optional[str] = None


@dataclass
class ButtonConfig:
    label: Optional[str] = None
    position: Optional[str] = None
    variant: Optional[str] = None
    size: Optional[str] = None
    disabled: Optional[bool] = None
    hidden: Optional[bool] = None
    icon: Optional[str] = None
    aria_label: Optional[str] = None


@dataclass
class FormSettings:
    submit_button: Optional[ButtonConfig] = None
    reset_button: Optional[ButtonConfig] = None
    save_button: Optional[ButtonConfig] = None
    cancel_button: Optional[ButtonConfig] = None
    show_progress: Optional[bool] = None
    allow_save: Optional[bool] = None
    allow_reset: Optional[bool] = None
    allow_draft: Optional[bool] = None
    auto_save: Optional[bool] = None
    auto_save_interval: Optional[int] = None
    auto_focus: Optional[bool] = None
    validate_on_change: Optional[bool] = None
    validate_on_blur: Optional[bool] = None
    focus_first_error: Optional[bool] = None
    scroll_to_error: Optional[bool] = None
    confirm_on_leave: Optional[bool] = None
    submit_on_enter: Optional[bool] = None


@dataclass
class StepValidation:
    validate_on_next: Optional[bool] = None
    validate_on_previous: Optional[bool] = None


@dataclass
class FormStep:
    """A wizard step listing the ids of the fields it shows."""

    id: str
    title: str
    fields: List[str] = field(default_factory=list)
    description: Optional[str] = None
    optional: Optional[bool] = None
    icon: Optional[str] = None
    validation: Optional[StepValidation] = None


@dataclass
class FieldGroup:
    """A visual grouping of fields by id."""

    id: str
    title: str
    fields: List[str] = field(default_factory=list)
    description: Optional[str] = None
    collapsed: Optional[bool] = None
    collapsible: Optional[bool] = None
    default_expanded: Optional[bool] = None
    icon: Optional[str] = None
    layout: Optional[str] = None  # vertical | horizontal | grid


@dataclass
class FormTheme:
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    error_color: Optional[str] = None
    success_color: Optional[str] = None
    warning_color: Optional[str] = None
    font_family: Optional[str] = None
    font_size: Optional[str] = None
    border_radius: Optional[str] = None
    spacing: Optional[str] = None


@dataclass
class I18nConfig:
    locale: Optional[str] = None
    direction: Optional[str] = None  # ltr | rtl
    default_locale: Optional[str] = None
    supported_locales: Optional[List[str]] = None
    translations: Optional[Dict[str, Dict[str, str]]] = None
    date_format: Optional[str] = None
    time_format: Optional[str] = None
    number_format: Optional[str] = None
    currency: Optional[str] = None
    currency_format: Optional[str] = None


@dataclass
class FormDefinition:
    """
    Root container for a GFF form document.

    This is THE primary artifact: renderers and schema validators
    consume its JSON form unchanged.

    Properties:
        form_id:
            Form identifier (non-empty)

        version:
            Format version, "1.0" unless stated otherwise

        fields:
            Ordered fields, unique by id

        dependencies:
            Ordered reactive rules (see gff.conditions)

        functions:
            Declared external functions by name

        metadata:
            Arbitrary key-value pairs

    INVARIANTS:
        - No two fields share an id unless they are deep-equal
        - Forms are never mutated in place; gff.form returns new objects
    """

    form_id: str
    version: str = "1.0"
    title: Optional[str] = None
    description: Optional[str] = None
    fields: List[Field] = field(default_factory=list)
    dependencies: Optional[List[Dependency]] = field(default_factory=list)
    functions: Optional[Dict[str, FunctionDef]] = field(default_factory=dict)
    metadata: Optional[Dict[str, Any]] = None
    settings: Optional[FormSettings] = None
    steps: Optional[List[FormStep]] = None
    groups: Optional[List[FieldGroup]] = None
    theme: Optional[FormTheme] = None
    i18n: Optional[I18nConfig] = None

    def get_field(self, field_id: str) -> Optional[Field]:
        """
        Retrieve a field by ID.

        Returns:
            Field object or None if not found
        """
        for f in self.fields:
            if f.id == field_id:
                return f
        return None

    def field_ids(self) -> List[str]:
        return [f.id for f in self.fields]
