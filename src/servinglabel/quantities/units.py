"""Physical unit tags and the synonym table used to recognize them."""

from enum import Enum

# =============================================================================
# Unit Tags
# =============================================================================


class VolumeUnit(Enum):
    """Volume units recognized on labels (factor base unit: liter)."""

    CENTILITER = "centiliter"
    CUBIC_CENTIMETER = "cubic_centimeter"
    CUBIC_INCH = "cubic_inch"
    CUP = "cup"
    FLUID_OUNCE = "fluid_ounce"
    GALLON = "gallon"
    LITER = "liter"
    MILLILITER = "milliliter"
    PINT = "pint"
    QUART = "quart"
    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"

    @property
    def factor(self) -> float:
        """Liters per one of this unit."""
        return VOLUME_FACTORS[self]

    @property
    def symbol(self) -> str:
        """Canonical surface form, always present in the synonym table."""
        return UNIT_SYMBOLS[self]


class MassUnit(Enum):
    """Mass units recognized on labels (factor base unit: gram)."""

    CENTIGRAM = "centigram"
    GRAM = "gram"
    KILOGRAM = "kilogram"
    MILLIGRAM = "milligram"
    OUNCE = "ounce"
    POUND = "pound"

    @property
    def factor(self) -> float:
        """Grams per one of this unit."""
        return MASS_FACTORS[self]

    @property
    def symbol(self) -> str:
        """Canonical surface form, always present in the synonym table."""
        return UNIT_SYMBOLS[self]


PhysicalUnit = VolumeUnit | MassUnit


# =============================================================================
# Conversion Factors
# =============================================================================

# US customary, liquid measures where ambiguous
VOLUME_FACTORS: dict[VolumeUnit, float] = {
    VolumeUnit.CENTILITER: 0.01,
    VolumeUnit.CUBIC_CENTIMETER: 0.001,
    VolumeUnit.CUBIC_INCH: 0.016387064,
    VolumeUnit.CUP: 0.2365882365,
    VolumeUnit.FLUID_OUNCE: 0.0295735295625,
    VolumeUnit.GALLON: 3.785411784,
    VolumeUnit.LITER: 1.0,
    VolumeUnit.MILLILITER: 0.001,
    VolumeUnit.PINT: 0.473176473,
    VolumeUnit.QUART: 0.946352946,
    VolumeUnit.TABLESPOON: 0.01478676478125,
    VolumeUnit.TEASPOON: 0.00492892159375,
}

# Avoirdupois ounce and pound
MASS_FACTORS: dict[MassUnit, float] = {
    MassUnit.CENTIGRAM: 0.01,
    MassUnit.GRAM: 1.0,
    MassUnit.KILOGRAM: 1000.0,
    MassUnit.MILLIGRAM: 0.001,
    MassUnit.OUNCE: 28.349523125,
    MassUnit.POUND: 453.59237,
}


# =============================================================================
# Synonym Table
# =============================================================================

VOLUME_SYNONYMS: dict[str, VolumeUnit] = {
    "centiliter": VolumeUnit.CENTILITER,
    "centiliters": VolumeUnit.CENTILITER,
    "cl": VolumeUnit.CENTILITER,
    "cubic centimeter": VolumeUnit.CUBIC_CENTIMETER,
    "cubic centimeters": VolumeUnit.CUBIC_CENTIMETER,
    "cubic inch": VolumeUnit.CUBIC_INCH,
    "cubic inches": VolumeUnit.CUBIC_INCH,
    "cup": VolumeUnit.CUP,
    "cups": VolumeUnit.CUP,
    "fl.oz.": VolumeUnit.FLUID_OUNCE,
    "fl. oz.": VolumeUnit.FLUID_OUNCE,
    "fl oz": VolumeUnit.FLUID_OUNCE,
    "fluid ounce": VolumeUnit.FLUID_OUNCE,
    "fluid oz": VolumeUnit.FLUID_OUNCE,
    "fluid ounces": VolumeUnit.FLUID_OUNCE,
    "oza": VolumeUnit.FLUID_OUNCE,
    "gallon": VolumeUnit.GALLON,
    "gallons": VolumeUnit.GALLON,
    "gals": VolumeUnit.GALLON,
    "gal": VolumeUnit.GALLON,
    "l": VolumeUnit.LITER,
    "liter": VolumeUnit.LITER,
    "liters": VolumeUnit.LITER,
    "ml": VolumeUnit.MILLILITER,
    "milliliter": VolumeUnit.MILLILITER,
    "milliliters": VolumeUnit.MILLILITER,
    "pint": VolumeUnit.PINT,
    "pints": VolumeUnit.PINT,
    "quart": VolumeUnit.QUART,
    "quarts": VolumeUnit.QUART,
    "tbsp": VolumeUnit.TABLESPOON,
    "tablespoon": VolumeUnit.TABLESPOON,
    "tablespoons": VolumeUnit.TABLESPOON,
    "tsp": VolumeUnit.TEASPOON,
    "teaspoon": VolumeUnit.TEASPOON,
    "teaspoons": VolumeUnit.TEASPOON,
}

MASS_SYNONYMS: dict[str, MassUnit] = {
    "centigram": MassUnit.CENTIGRAM,
    "centigrams": MassUnit.CENTIGRAM,
    "cg": MassUnit.CENTIGRAM,
    "gram": MassUnit.GRAM,
    "grams": MassUnit.GRAM,
    "g": MassUnit.GRAM,
    "grm": MassUnit.GRAM,
    "gr": MassUnit.GRAM,
    "kilogram": MassUnit.KILOGRAM,
    "kilograms": MassUnit.KILOGRAM,
    "kg": MassUnit.KILOGRAM,
    "milligram": MassUnit.MILLIGRAM,
    "milligrams": MassUnit.MILLIGRAM,
    "mg": MassUnit.MILLIGRAM,
    "ounce": MassUnit.OUNCE,
    "onz": MassUnit.OUNCE,
    "ounces": MassUnit.OUNCE,
    "oz": MassUnit.OUNCE,
    "oz.": MassUnit.OUNCE,
    "wt. oz.": MassUnit.OUNCE,
    "wt.oz.": MassUnit.OUNCE,
    "wt oz": MassUnit.OUNCE,
    "pound": MassUnit.POUND,
    "pounds": MassUnit.POUND,
    "lb": MassUnit.POUND,
    "lbs": MassUnit.POUND,
}

UNIT_SYNONYMS: dict[str, PhysicalUnit] = {**VOLUME_SYNONYMS, **MASS_SYNONYMS}

UNIT_SYMBOLS: dict[PhysicalUnit, str] = {
    VolumeUnit.CENTILITER: "cl",
    VolumeUnit.CUBIC_CENTIMETER: "cubic centimeters",
    VolumeUnit.CUBIC_INCH: "cubic inches",
    VolumeUnit.CUP: "cup",
    VolumeUnit.FLUID_OUNCE: "fl oz",
    VolumeUnit.GALLON: "gal",
    VolumeUnit.LITER: "l",
    VolumeUnit.MILLILITER: "ml",
    VolumeUnit.PINT: "pint",
    VolumeUnit.QUART: "quart",
    VolumeUnit.TABLESPOON: "tbsp",
    VolumeUnit.TEASPOON: "tsp",
    MassUnit.CENTIGRAM: "cg",
    MassUnit.GRAM: "g",
    MassUnit.KILOGRAM: "kg",
    MassUnit.MILLIGRAM: "mg",
    MassUnit.OUNCE: "oz",
    MassUnit.POUND: "lb",
}


# =============================================================================
# Lookup
# =============================================================================


def normalize_unit(phrase: str) -> PhysicalUnit | None:
    """
    Map a unit phrase to its physical unit tag.

    Matching is exact against the synonym table after lower-casing, so
    "gallon" and "gallons" hit separate entries and "gallo" hits nothing.

    Returns:
        The unit tag, or None when the phrase is not a physical unit.
    """
    return UNIT_SYNONYMS.get(phrase.lower())
