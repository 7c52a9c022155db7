from .options import PickerOptions
from .schema import DEFAULT_OPTIONS, PICKER_OPTIONS_SCHEMA, merge_with_defaults, validate_options
from .strings import PickerStrings

__all__ = [
    "DEFAULT_OPTIONS",
    "PICKER_OPTIONS_SCHEMA",
    "PickerOptions",
    "PickerStrings",
    "merge_with_defaults",
    "validate_options",
]
