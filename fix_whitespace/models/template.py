"""Template data model."""
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Template:
    """Literal text segments interleaved with interpolated values."""

    segments: Tuple[str, ...]
    values: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Freeze the incoming sequences so a template can't change mid-render."""
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def from_text(cls, text: str) -> "Template":
        """Build a template with a single literal segment and no values."""
        return cls(segments=(text,), values=())

    def literal_text(self) -> str:
        """Concatenate the literal segments without any values between them."""
        return "".join(self.segments)

    def value_at(self, index: int) -> Optional[Any]:
        """
        Get the value interpolated right after segments[index].

        Returns:
            The value, or None if there is no value at that position
            (always the case after the trailing segment)
        """
        if 0 <= index < len(self.values):
            return self.values[index]
        return None

    def __len__(self) -> int:
        return len(self.segments)

