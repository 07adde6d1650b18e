# parsers/models.py

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Text category a roast line is filed under."""

    ENGLISH = "english"
    HINGLISH = "hinglish"


@dataclass(frozen=True)
class RoastCollection:
    """Everything extracted from one document, in document order."""

    english: list[str] = field(default_factory=list)
    hinglish: list[str] = field(default_factory=list)
    memes: list[str] = field(default_factory=list)

    def for_category(self, category: Category) -> list[str]:
        if category is Category.ENGLISH:
            return self.english
        return self.hinglish

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "english": list(self.english),
            "hinglish": list(self.hinglish),
            "memes": list(self.memes),
        }

    @property
    def is_empty(self) -> bool:
        return not (self.english or self.hinglish or self.memes)

    def __len__(self) -> int:
        return len(self.english) + len(self.hinglish) + len(self.memes)
