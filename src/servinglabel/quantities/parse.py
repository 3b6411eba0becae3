"""
Parsers for serving quantities written on food labels.

Every parser takes the unconsumed input and returns ``(remaining, value)``,
raising ParseError when its construct is not at the start of the input.
Optional constructs are handled by catching ParseError and keeping the
previous remainder, so a failed attempt never consumes anything.
"""

import re

from servinglabel.logging_config import get_logger
from servinglabel.quantities.errors import ParseError, ParseErrorKind
from servinglabel.quantities.models import Nominal, Quantity, physical_quantity

logger = get_logger(__name__)


# =============================================================================
# Patterns
# =============================================================================

_WS = r"[ \t\r\n]"

# "1 1/2", trailing whitespace included
COMPOUND_FRACTION_RE = re.compile(rf"(\d+){_WS}+(\d+){_WS}*/{_WS}*(\d+){_WS}*")
# "1/2", trailing whitespace included
FRACTION_RE = re.compile(rf"(\d+){_WS}*/{_WS}*(\d+){_WS}*")
# "1.5", "1.", ".5", "1e3"; the exponent needs digits so "2eggs" stays "2"
FLOAT_RE = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

WHITESPACE_RE = re.compile(rf"{_WS}+")

# letters, then letters, periods or hyphens ("oz.", "k-cups", "fl.oz.")
UNIT_WORD_RE = re.compile(r"[A-Za-z][A-Za-z.\-]*")

NOISE_RE = re.compile(
    rf'(?:about|approx\.|approximately|makes|"|\||{_WS}+)*',
    re.IGNORECASE,
)


def _skip_whitespace(text: str) -> str:
    match = WHITESPACE_RE.match(text)
    return text[match.end() :] if match else text


# =============================================================================
# Numbers
# =============================================================================


def _compound_fraction(text: str) -> tuple[str, float] | None:
    match = COMPOUND_FRACTION_RE.match(text)
    if not match:
        return None
    whole, numerator, denominator = (float(g) for g in match.groups())
    if denominator == 0:
        return None
    return text[match.end() :], whole + numerator / denominator


def _fraction(text: str) -> tuple[str, float] | None:
    match = FRACTION_RE.match(text)
    if not match:
        return None
    numerator, denominator = (float(g) for g in match.groups())
    if denominator == 0:
        return None
    return text[match.end() :], numerator / denominator


def _float(text: str) -> tuple[str, float] | None:
    match = FLOAT_RE.match(text)
    if not match:
        return None
    return text[match.end() :], float(match.group(0))


def number(text: str) -> tuple[str, float]:
    """
    Parse a leading numeric literal.

    Handles formats like:
    - "1 1/2" (compound fraction, 1.5)
    - "1/2" (simple fraction, 0.5)
    - "1.123" (plain decimal)

    Fractions consume the whitespace that follows them, so "1 1/2 cups"
    leaves "cups" while "1.5 cups" leaves " cups".

    Returns:
        Tuple of (remaining input, magnitude).

    Raises:
        ParseError: If no number starts the input.
    """
    for form in (_compound_fraction, _fraction, _float):
        result = form(text)
        if result is not None:
            return result
    raise ParseError.at(ParseErrorKind.NUMBER_EXPECTED, text, "expected a number")


# =============================================================================
# Unit Words
# =============================================================================


def unit_word(text: str) -> tuple[str, str]:
    """
    Split off the leading unit word.

    A unit word is a run of letters that may contain periods and hyphens
    after its first character, as in "oz.", "fl.oz." or "k-cups".

    Returns:
        Tuple of (remaining input, word) with the word's case preserved.

    Raises:
        ParseError: If the input does not start with a letter.
    """
    match = UNIT_WORD_RE.match(text)
    if not match:
        raise ParseError.at(ParseErrorKind.UNIT_WORD_EXPECTED, text, "expected a unit word")
    return text[match.end() :], match.group(0)


def _next_word(text: str) -> tuple[str, str]:
    """Parse whitespace followed by a unit word."""
    match = WHITESPACE_RE.match(text)
    if not match:
        raise ParseError.at(ParseErrorKind.UNIT_WORD_EXPECTED, text, "expected a unit word")
    return unit_word(text[match.end() :])


# =============================================================================
# Quantities
# =============================================================================


def quantity(text: str) -> tuple[str, Quantity]:
    """
    Parse a number followed by its unit.

    Words are taken one at a time until the phrase seen so far names a
    physical unit ("5.26 fl. oz." stops at "oz."). If the words run out
    first, the whole phrase becomes the label of a Nominal quantity
    ("1 large bag" gives Nominal(1.0, "large bag")).

    Returns:
        Tuple of (remaining input, quantity).

    Raises:
        ParseError: If there is no number, or no word after the number.
    """
    rest, magnitude = number(text)
    rest, word = unit_word(_skip_whitespace(rest))

    found = physical_quantity(magnitude, word)
    if found is not None:
        return rest, found

    phrase = word.lower()
    while True:
        try:
            after, word = _next_word(rest)
        except ParseError:
            break
        rest = after
        phrase = f"{phrase} {word.lower()}"
        found = physical_quantity(magnitude, phrase)
        if found is not None:
            return rest, found

    logger.debug(f"No physical unit in '{phrase}', keeping nominal quantity")
    return rest, Nominal(count=magnitude, label=phrase)


def noise(text: str) -> str:
    """Strip filler such as "about", "approx.", quotes, pipes and whitespace."""
    return text[NOISE_RE.match(text).end() :]


def _trailing_quantity(text: str) -> tuple[str, Quantity]:
    """Parse one more quantity, optionally wrapped in parentheses."""
    rest = _skip_whitespace(text)
    if rest.startswith("("):
        rest = rest[1:]
    rest, found = quantity(noise(rest))
    rest = noise(rest)
    if rest.startswith(")"):
        rest = rest[1:]
    return _skip_whitespace(rest), found


def quantities(text: str) -> list[Quantity]:
    """
    Parse every quantity on a label, e.g. "1 cup (240 ml)".

    The first quantity is mandatory. Further quantities may follow, bare or
    in parentheses, and filler is allowed anywhere between them. Quantities
    are returned in the order they appear.

    Raises:
        ParseError: If the label does not start with a quantity, or if
            anything other than quantities and filler remains. The error's
            position is an offset into ``text``.
    """
    try:
        rest, first = quantity(noise(text))
        found = [first]
        rest = _skip_whitespace(rest)

        while rest:
            try:
                rest, extra = _trailing_quantity(rest)
            except ParseError:
                break
            found.append(extra)

        rest = noise(rest)
        if rest:
            raise ParseError(ParseErrorKind.TRAILING_CONTENT, rest, "expected end of input")
    except ParseError as exc:
        exc.locate(text)
        raise

    logger.debug(f"Parsed {len(found)} quantities from '{text}'")
    return found
