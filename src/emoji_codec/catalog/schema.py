from __future__ import annotations


from pydantic import BaseModel, ConfigDict, Field

from .models import EmojiEntry, SequenceKind


class CatalogRecord(BaseModel):
    """One row of the JSON emoji database."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    emoji: str = Field(min_length=1)
    emoji_char: str | None = Field(default=None, alias="emojiChar")
    description: str | None = None
    sequence_type: SequenceKind | None = None
    supports_fitzpatrick: bool = False
    aliases: list[str] = Field(min_length=1)
    tags: list[str]

    @property
    def sequence_kind(self) -> SequenceKind:
        if self.sequence_type is not None:
            return self.sequence_type
        # Older data only flags fitzpatrick support
        if self.supports_fitzpatrick:
            return SequenceKind.BASE_SKIN_GENDER
        return SequenceKind.PLAIN

    def to_entry(self) -> EmojiEntry:
        alternate = self.emoji_char if self.emoji_char and self.emoji_char != self.emoji else None
        return EmojiEntry(
            unicode=self.emoji,
            aliases=tuple(self.aliases),
            tags=frozenset(self.tags),
            sequence_kind=self.sequence_kind,
            description=self.description,
            alternate=alternate,
        )
