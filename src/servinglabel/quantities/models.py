"""Typed serving quantities produced by the label parsers."""

from dataclasses import dataclass
from typing import Any

from servinglabel.quantities.units import MassUnit, VolumeUnit, normalize_unit


def _format_magnitude(value: float) -> str:
    """
    Render a magnitude so the number parser reads it back unchanged.

    Only finite magnitudes round-trip. Fractions with huge digit strings
    parse to inf, which renders as "inf" and is not a number literal.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Volume:
    """A physical volume, e.g. ``2 cups``."""

    magnitude: float
    unit: VolumeUnit

    @property
    def liters(self) -> float:
        return self.magnitude * self.unit.factor

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "volume", "magnitude": self.magnitude, "unit": self.unit.value}

    def __str__(self) -> str:
        return f"{_format_magnitude(self.magnitude)} {self.unit.symbol}"


@dataclass(frozen=True)
class Mass:
    """A physical mass, e.g. ``35 g``."""

    magnitude: float
    unit: MassUnit

    @property
    def grams(self) -> float:
        return self.magnitude * self.unit.factor

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "mass", "magnitude": self.magnitude, "unit": self.unit.value}

    def __str__(self) -> str:
        return f"{_format_magnitude(self.magnitude)} {self.unit.symbol}"


@dataclass(frozen=True)
class Nominal:
    """
    A count paired with a unit label that is not a physical unit.

    The label is lower-cased with single spaces between words, e.g.
    ``Nominal(1.0, "large bag")``.
    """

    count: float
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "nominal", "count": self.count, "label": self.label}

    def __str__(self) -> str:
        return f"{_format_magnitude(self.count)} {self.label}"


Quantity = Volume | Mass | Nominal


def physical_quantity(magnitude: float, phrase: str) -> Volume | Mass | None:
    """
    Build a Volume or Mass for ``phrase`` if it names a physical unit.

    Returns:
        The quantity, or None when the phrase is not in the synonym table.
    """
    unit = normalize_unit(phrase)
    if isinstance(unit, VolumeUnit):
        return Volume(magnitude=magnitude, unit=unit)
    if isinstance(unit, MassUnit):
        return Mass(magnitude=magnitude, unit=unit)
    return None
