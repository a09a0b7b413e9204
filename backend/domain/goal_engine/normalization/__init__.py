"""Input normalization for the goal engine."""

from .input_normalizer import (
    NormalizationResult,
    normalize,
    parse_age,
    parse_decimal,
    parse_height,
    parse_weight,
)
from .signature import InputSignature, build_signature
from .unit_conversion import (
    UnitConversion,
    convert_weight_unit,
    format_weight,
    split_height_cm,
)

__all__ = [
    "NormalizationResult",
    "normalize",
    "parse_age",
    "parse_decimal",
    "parse_height",
    "parse_weight",
    "InputSignature",
    "build_signature",
    "UnitConversion",
    "convert_weight_unit",
    "format_weight",
    "split_height_cm",
]
