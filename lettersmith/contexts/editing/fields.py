"""
Field board: the ordered set of short values a user drags into the document.
"""

from dataclasses import dataclass
from typing import List, Tuple

from omegaconf import DictConfig

DEFAULT_FIELD_COUNT = 10
DEFAULT_MAX_LENGTH = 20


@dataclass(frozen=True)
class FieldBoard:
    """
    Immutable ordered field slots.

    The length cap is enforced here, at the field surface. The document core
    accepts any value a caller places.
    """

    values: Tuple[str, ...] = ("",) * DEFAULT_FIELD_COUNT
    max_length: int = DEFAULT_MAX_LENGTH

    @classmethod
    def blank(cls, count: int = DEFAULT_FIELD_COUNT, max_length: int = DEFAULT_MAX_LENGTH) -> "FieldBoard":
        if count < 1:
            raise ValueError(f"Field count must be positive, got {count}")
        if max_length < 1:
            raise ValueError(f"Field max_length must be positive, got {max_length}")
        return cls(values=("",) * count, max_length=max_length)

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "FieldBoard":
        """Build from the `fields` config section."""
        return cls.blank(count=cfg.count, max_length=cfg.max_length)

    def __len__(self) -> int:
        return len(self.values)

    def value(self, index: int) -> str:
        return self.values[index]

    def with_value(self, index: int, value: str) -> "FieldBoard":
        """New board with one slot set, truncated to max_length."""
        if not 0 <= index < len(self.values):
            raise IndexError(f"Field index {index} out of range (0-{len(self.values) - 1})")
        values = list(self.values)
        values[index] = (value or "")[: self.max_length]
        return FieldBoard(values=tuple(values), max_length=self.max_length)

    def label(self, index: int) -> str:
        """Display label: the value, or 'Field N' (1-based) for an empty slot."""
        return self.values[index] or f"Field {index + 1}"

    def items(self) -> List[Tuple[int, str]]:
        return list(enumerate(self.values))
