"""Serving quantities and the parsers that read them from label text."""

from servinglabel.quantities.errors import ParseError, ParseErrorKind
from servinglabel.quantities.models import Mass, Nominal, Quantity, Volume, physical_quantity
from servinglabel.quantities.parse import noise, number, quantities, quantity, unit_word
from servinglabel.quantities.units import (
    UNIT_SYNONYMS,
    MassUnit,
    VolumeUnit,
    normalize_unit,
)

__all__ = [
    "Mass",
    "MassUnit",
    "Nominal",
    "ParseError",
    "ParseErrorKind",
    "Quantity",
    "UNIT_SYNONYMS",
    "Volume",
    "VolumeUnit",
    "noise",
    "normalize_unit",
    "number",
    "physical_quantity",
    "quantities",
    "quantity",
    "unit_word",
]
