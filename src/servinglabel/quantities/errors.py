"""Exceptions raised by the serving quantity parsers."""

from enum import Enum


class ParseErrorKind(str, Enum):
    """What the parser was looking for when it gave up."""

    NUMBER_EXPECTED = "number_expected"
    UNIT_WORD_EXPECTED = "unit_word_expected"
    TRAILING_CONTENT = "trailing_content"
    INPUT_EXHAUSTED = "input_exhausted"


class ParseError(ValueError):
    """Raised when a serving string cannot be parsed.

    Sub-parsers only know the unconsumed input at the failure point
    (``remaining``). The sequence parser fills in ``position`` relative to the
    full label string before the error reaches the caller.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        remaining: str,
        expected: str = "",
        position: int | None = None,
    ):
        self.kind = kind
        self.remaining = remaining
        self.expected = expected or kind.value.replace("_", " ")
        self.position = position
        super().__init__(self._message())

    def _message(self) -> str:
        where = f" at position {self.position}" if self.position is not None else ""
        found = repr(self.remaining[:20]) if self.remaining else "end of input"
        return f"{self.expected}{where}, found {found}"

    def locate(self, text: str) -> "ParseError":
        """Set ``position`` as an offset into ``text`` and return self."""
        self.position = len(text) - len(self.remaining)
        self.args = (self._message(),)
        return self

    @classmethod
    def at(cls, kind: ParseErrorKind, remaining: str, expected: str = "") -> "ParseError":
        """Build an error, reporting exhausted input when nothing is left."""
        if not remaining:
            kind = ParseErrorKind.INPUT_EXHAUSTED
        return cls(kind, remaining, expected)
