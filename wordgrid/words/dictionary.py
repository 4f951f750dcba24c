"""
Dictionary of valid words.

Loads a newline-delimited word list, plain or compressed, into an
immutable set. A dictionary is built once at startup and then shared by
reference with whatever needs to validate words.
"""

import gzip
import io
import logging
import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO, FrozenSet, Iterable, Iterator, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..errors import LoadError
from .normalize import normalize

logger = logging.getLogger(__name__)

DictionarySource = Union[str, Path, bytes, BinaryIO]

GZIP_MAGIC = b"\x1f\x8b"
ZIP_MAGIC = b"PK\x03\x04"
# zlib streams start with 0x78 followed by a level-dependent flag byte.
# 0x78 0x5e ("x^") is left out since plain text can start with it.
ZLIB_MAGIC = (b"\x78\x01", b"\x78\x9c", b"\x78\xda")

_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORD_LIST = _DATA_DIR / "words.txt.gz"


def _decompress(data: bytes, entry: Optional[str]) -> bytes:
    """Undo whatever compression the leading magic bytes announce."""
    if data.startswith(GZIP_MAGIC):
        return gzip.decompress(data)
    if data.startswith(ZIP_MAGIC):
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            names = archive.namelist()
            if entry is None:
                if len(names) != 1:
                    raise LoadError(
                        f"Zip archive holds {len(names)} members; name the word list entry"
                    )
                entry = names[0]
            if entry not in names:
                raise LoadError(f"Zip archive has no member '{entry}'")
            return archive.read(entry)
    if data[:2] in ZLIB_MAGIC:
        return zlib.decompress(data)
    return data


def _read_source(source: DictionarySource) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    if not hasattr(source, "read"):
        raise LoadError(f"Cannot read a word list from {type(source).__name__}")

    data = source.read()
    if not isinstance(data, (bytes, bytearray)):
        raise LoadError(
            f"Word list stream returned {type(data).__name__}, expected bytes"
        )
    return bytes(data)


def _parse_lines(text: str) -> Iterator[str]:
    for line in text.splitlines():
        word = normalize(line)
        if word:
            yield word


class Dictionary(BaseModel):
    """
    Immutable set of lowercase words.

    Attributes:
        words: Every valid word, trimmed and lower-cased
        source: Human readable description of where the words came from
    """

    model_config = ConfigDict(frozen=True)

    words: FrozenSet[str] = Field(default_factory=frozenset)
    source: str = "<memory>"

    @classmethod
    def from_words(cls, words: Iterable[str], source: str = "<memory>") -> "Dictionary":
        """Build a dictionary from an iterable, normalizing every entry."""
        normalized = frozenset(w for w in (normalize(word) for word in words) if w)
        return cls(words=normalized, source=source)

    @classmethod
    def load(cls, source: DictionarySource, entry: Optional[str] = None) -> "Dictionary":
        """
        Load a word list.

        The content is newline-delimited words, optionally gzip, zlib or zip
        compressed; compression is detected from the leading bytes. Each line
        is trimmed and lower-cased and blank lines are dropped.

        Args:
            source: Path to a word list file, its raw bytes, or a readable
                binary stream
            entry: Member to read when the source is a zip archive holding
                more than one file

        Returns:
            The fully populated Dictionary

        Raises:
            LoadError: If the source cannot be read, decompressed or decoded
        """
        label = str(source) if isinstance(source, (str, Path)) else f"<{type(source).__name__}>"
        try:
            raw = _read_source(source)
            text = _decompress(raw, entry).decode("utf-8")
        except LoadError:
            raise
        except (OSError, ValueError, EOFError, zlib.error, zipfile.BadZipFile) as e:
            raise LoadError(f"Could not load word list from {label}: {e}") from e

        dictionary = cls(words=frozenset(_parse_lines(text)), source=label)
        logger.info("Loaded %s words from %s", len(dictionary), label)
        return dictionary

    @classmethod
    def load_default(cls) -> "Dictionary":
        """Load the word list bundled with the package."""
        return cls.load(DEFAULT_WORD_LIST)

    def contains(self, word: str) -> bool:
        """Exact membership test; the caller normalizes."""
        return word in self.words

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)
