import sys
from enum import Enum
from functools import total_ordering
from typing import IO, Optional, Union


@total_ordering
class ColorChoice(Enum):
    """Possible color choices for the output.

    Ordered from least to most colorful: NEVER < AUTO < ALWAYS.
    """

    NEVER = 'never'
    AUTO = 'auto'
    ALWAYS = 'always'

    def __lt__(self, other):
        if not isinstance(other, ColorChoice):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, 'ColorChoice']) -> 'ColorChoice':
        """Convert a choice name (case-insensitive) or a ColorChoice to a ColorChoice."""
        if isinstance(value, ColorChoice):
            return value
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(
                f"Invalid color choice {value!r}, expected one of: {', '.join(CHOICES)}"
            ) from None

    def for_terminal(self, is_terminal: bool) -> bool:
        """Collapse the choice to an on/off decision for an output sink.

        NEVER and ALWAYS ignore `is_terminal`; AUTO returns it.
        """
        if self is ColorChoice.ALWAYS:
            return True
        elif self is ColorChoice.NEVER:
            return False
        else:  # auto
            return bool(is_terminal)

    def for_stream(self, stream: Optional[IO] = None) -> bool:
        """Determine the color setting for a specific stream (default: stdout)."""
        if self is not ColorChoice.AUTO:
            return self.for_terminal(False)
        return self.for_terminal(is_terminal(sys.stdout if stream is None else stream))

    def to_click(self) -> Optional[bool]:
        """Convert to click's `color` setting: True, False, or None (autodetect)."""
        return _TO_CLICK[self]

    @classmethod
    def from_click(cls, color: Optional[bool]) -> 'ColorChoice':
        if color is None:
            return cls.AUTO
        return cls.ALWAYS if color else cls.NEVER


_ORDER = {choice: idx for idx, choice in enumerate(ColorChoice)}
_TO_CLICK = {
    ColorChoice.NEVER: False,
    ColorChoice.AUTO: None,
    ColorChoice.ALWAYS: True,
}

CHOICES = tuple(choice.value for choice in ColorChoice)


def is_terminal(stream: IO) -> bool:
    """Whether `stream` is connected to an interactive terminal.

    Streams without `isatty`, or closed ones, count as non-terminals.
    """
    isatty = getattr(stream, 'isatty', None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # I/O operation on closed file
        return False
