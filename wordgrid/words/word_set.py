"""Mutable set of normalized words with set-algebra helpers."""

from typing import Any, Iterable, Iterator, List, Set, Tuple
from pydantic import BaseModel, Field, field_serializer, field_validator

from .normalize import normalize


class WordSet(BaseModel):
    """
    A set of lowercase words, unique by value.

    Used both as a player's found-words collection and as scratch storage
    while scoring. The in-place operations (insert, union_with, subtract,
    clear) mutate the receiver; union and difference return new sets and
    leave both operands untouched.

    Attributes:
        words: The normalized words currently in the set
    """

    words: Set[str] = Field(default_factory=set)

    @field_validator("words", mode="before")
    @classmethod
    def _normalize_words(cls, value: Any) -> Set[str]:
        if value is None:
            return set()
        normalized = {normalize(w) for w in value}
        normalized.discard("")
        return normalized

    @field_serializer("words")
    def _serialize_words(self, words: Set[str]) -> List[str]:
        return sorted(words)

    @classmethod
    def of(cls, *words: str) -> "WordSet":
        """Build a set from the given words."""
        return cls(words=words)

    def insert(self, word: str) -> None:
        """
        Add a word after trimming and lower-casing it.

        Words that normalize to the empty string, and words already in the
        set, are silently ignored.
        """
        word = normalize(word)
        if word:
            self.words.add(word)

    def contains(self, word: str) -> bool:
        """Exact membership test; the caller normalizes."""
        return word in self.words

    def union_with(self, other: "WordSet") -> None:
        """Add every word of `other` to this set."""
        self.words.update(other.words)

    def subtract(self, other: "WordSet") -> None:
        """Remove every word that also appears in `other`."""
        self.words.difference_update(other.words)

    def union(self, other: "WordSet") -> "WordSet":
        """Return a new set holding the words of both sets."""
        return WordSet.model_construct(words=self.words | other.words)

    def difference(self, other: "WordSet") -> "WordSet":
        """Return a new set holding the words of this set not in `other`."""
        return WordSet.model_construct(words=self.words - other.words)

    def copy(self) -> "WordSet":
        return WordSet.model_construct(words=set(self.words))

    def clear(self) -> None:
        self.words.clear()

    def size(self) -> int:
        return len(self.words)

    def to_sequence(self) -> Tuple[str, ...]:
        """Snapshot of the current words, in no particular order."""
        return tuple(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.to_sequence())

    @classmethod
    def union_all(cls, sets: Iterable["WordSet"]) -> "WordSet":
        """Union of any number of sets, as a new set."""
        merged: Set[str] = set()
        for word_set in sets:
            merged.update(word_set.words)
        return cls.model_construct(words=merged)
