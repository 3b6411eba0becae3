"""Pydantic schema for food label serving fields and label-level parsing."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from servinglabel.logging_config import LoggingContext, get_logger
from servinglabel.quantities import ParseError, Quantity, physical_quantity, quantities

logger = get_logger(__name__)


class FoodLabel(BaseModel):
    """Serving information of a branded food record from the nutrition database."""

    model_config = ConfigDict(populate_by_name=True)

    fdc_id: int | None = Field(default=None, alias="fdcId")
    description: str | None = None
    household_serving_full_text: str | None = Field(
        default=None, alias="householdServingFullText"
    )
    serving_size: float | None = Field(default=None, ge=0, alias="servingSize")
    serving_size_unit: str | None = Field(default=None, alias="servingSizeUnit")

    @field_validator("household_serving_full_text", "serving_size_unit", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> str | None:
        """Treat empty or whitespace-only text as missing."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @property
    def label_id(self) -> str:
        """Identifier used to tag log records."""
        if self.fdc_id is not None:
            return str(self.fdc_id)
        return self.description or "unknown"


def parse_serving_text(text: str) -> list[Quantity]:
    """
    Parse a household serving string such as "1 cup (240 ml)".

    Raises:
        ParseError: If the text is not a sequence of quantities.
    """
    return quantities(text)


def parse_label_servings(label: FoodLabel | dict[str, Any]) -> list[Quantity]:
    """
    Collect every serving quantity a label declares.

    Household serving text is parsed first. The declared serving size is
    appended when its unit is a physical unit. Unparseable household text
    is logged and skipped, never raised.

    Args:
        label: A FoodLabel, or a raw record dict using API field names.

    Returns:
        List of quantities, possibly empty.
    """
    if isinstance(label, dict):
        label = FoodLabel.model_validate(label)

    found: list[Quantity] = []
    with LoggingContext(label_id=label.label_id):
        text = label.household_serving_full_text
        if text:
            try:
                found.extend(parse_serving_text(text))
            except ParseError as e:
                logger.warning(
                    f"Unparseable serving text '{text}': {e}",
                    extra={"kind": e.kind.value, "position": e.position},
                )

        if label.serving_size is not None and label.serving_size_unit:
            declared = physical_quantity(label.serving_size, label.serving_size_unit)
            if declared is not None:
                found.append(declared)
            else:
                logger.debug(f"Serving size unit '{label.serving_size_unit}' is not physical")

    return found
