"""Word records produced by the OJAD collector."""

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple


@dataclass(frozen=True)
class WordRecord:
    """A Japanese word with its morae and Tokyo-style pitch accent.

    Fields:
        kanji: Written form (kanji, or kana for words without kanji). May be
            empty when the source gives no headline.
        morae: Morae making up the reading, in order.
        accent_idx: 1-based mora after which the pitch drops, 0 for heiban.
        part_of_speech: Tag attached by the caller from the query category.

    Two records are equal when all fields match, so the same pronunciation
    and accent listed under several meanings collapses to one word unit.
    """
    kanji: str
    morae: Tuple[str, ...]
    accent_idx: int
    part_of_speech: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple to stay hashable
        object.__setattr__(self, "morae", tuple(self.morae))

        if not self.morae:
            raise ValueError("morae must not be empty")
        if self.accent_idx < 0:
            raise ValueError("accent_idx must be non-negative (0 for heiban)")
        if self.accent_idx > len(self.morae):
            raise ValueError(
                f"accent_idx {self.accent_idx} exceeds mora count {len(self.morae)}"
            )

    @classmethod
    def from_kana(
        cls,
        morae: Sequence[str],
        accent_idx: int,
        part_of_speech: str = "",
    ) -> "WordRecord":
        """Build a record for a kana-only word."""
        return cls("", tuple(morae), accent_idx, part_of_speech)

    @property
    def is_heiban(self) -> bool:
        return self.accent_idx == 0

    @property
    def reading(self) -> str:
        return "".join(self.morae)

    @property
    def mora_count(self) -> int:
        return len(self.morae)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON-lines record shape."""
        return {
            "kanji": self.kanji,
            "morae": list(self.morae),
            "accent_idx": self.accent_idx,
            "part_of_speech": self.part_of_speech,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordRecord":
        return cls(
            kanji=data.get("kanji", ""),
            morae=tuple(data["morae"]),
            accent_idx=int(data["accent_idx"]),
            part_of_speech=data.get("part_of_speech", ""),
        )

    def __str__(self) -> str:
        if self.kanji:
            return f"{self.kanji}[{self.reading}] ({self.accent_idx})"
        return f"{self.reading} ({self.accent_idx})"
