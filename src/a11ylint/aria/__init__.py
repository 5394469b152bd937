from .grammar import VALUE_VALIDATORS, describe_type, validate, validate_value
from .properties import (
    ARIA_PROPERTIES,
    ARIA_PROPERTY_TABLE,
    AriaProperty,
    AriaPropertyType,
    get_property,
    is_aria_attribute_name,
    property_names,
)

__all__ = [
    "ARIA_PROPERTIES",
    "ARIA_PROPERTY_TABLE",
    "AriaProperty",
    "AriaPropertyType",
    "VALUE_VALIDATORS",
    "describe_type",
    "get_property",
    "is_aria_attribute_name",
    "property_names",
    "validate",
    "validate_value",
]
