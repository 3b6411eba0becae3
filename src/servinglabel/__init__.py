"""servinglabel - parse serving-size text from food labels into typed quantities."""

from servinglabel.labels import FoodLabel, parse_label_servings, parse_serving_text
from servinglabel.quantities import (
    Mass,
    MassUnit,
    Nominal,
    ParseError,
    ParseErrorKind,
    Quantity,
    Volume,
    VolumeUnit,
    quantities,
    quantity,
)

__version__ = "0.1.0"

__all__ = [
    "FoodLabel",
    "Mass",
    "MassUnit",
    "Nominal",
    "ParseError",
    "ParseErrorKind",
    "Quantity",
    "Volume",
    "VolumeUnit",
    "parse_label_servings",
    "parse_serving_text",
    "quantities",
    "quantity",
]
