"""
Generic Form Format (GFF) Package

Builds, validates, merges and (de)serializes declarative form definitions.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Rendering
    - Evaluating conditions against live values
    - Executing validators, datasources or transformers

This package defines FORM STRUCTURE only.

Renderers and schema validators consume the emitted JSON unchanged.
"""

__version__ = "1.0.0"

from gff.conditions import (
    CompoundCondition,
    Condition,
    ConditionOperator,
    Dependency,
    Effect,
    EffectAction,
    LogicalOperator,
    SimpleCondition,
)
from gff.dependencies import (
    clear_value_effect,
    create_compound_condition,
    create_condition,
    create_datasource_function,
    create_dependency,
    create_effect,
    create_function_def,
    create_transformer_function,
    create_validator_function,
    disable_effect,
    enable_effect,
    hide_effect,
    require_effect,
    set_value_effect,
    show_effect,
    unrequire_effect,
    update_params_effect,
)
from gff.equality import deep_equal
from gff.errors import (
    DuplicateFieldError,
    FormCreationError,
    GFFError,
    error_handler,
    get_error_handler,
    set_error_handler,
)
from gff.fields import (
    create_autocomplete_field,
    create_checkbox_field,
    create_code_field,
    create_color_field,
    create_currency_field,
    create_date_field,
    create_datetime_field,
    create_email_field,
    create_file_field,
    create_hidden_field,
    create_image_field,
    create_nested_field,
    create_number_field,
    create_option,
    create_options,
    create_otp_field,
    create_password_field,
    create_radio_field,
    create_range_field,
    create_rating_field,
    create_richtext_field,
    create_select_field,
    create_signature_field,
    create_slider_field,
    create_tags_field,
    create_tel_field,
    create_text_field,
    create_textarea_field,
    create_time_field,
    create_toggle_field,
    create_url_field,
)
from gff.form import (
    add_dependency,
    add_field,
    add_function,
    create_form,
    get_field,
    remove_dependency,
    remove_field,
    remove_function,
    update_field,
)
from gff.merge import merge_forms
from gff.model import Field, FieldType, FormDefinition, FunctionDef, FunctionType
from gff.serialization import from_json, from_yaml, to_json, to_yaml
