"""Tokenizer definitions for custom analyzers.

Tokenizers form a closed, tagged union keyed by the ``type`` field. Only
the n-gram tokenizer is modeled; further tokenizer types are added by
subclassing TokenizerDefinition and registering the class in
TOKENIZER_TYPES.
"""

import logging
from enum import Enum, unique
from typing import Any, ClassVar

import msgspec
import msgspec.structs

from .decoding import (
    child_path,
    expect_list,
    expect_object,
    expect_str,
    require,
    stringly_int,
)
from .exceptions import InvalidEnumValueError, UnrecognizedVariantError

logger = logging.getLogger(__name__)


@unique
class TokenChar(str, Enum):
    """Character classes an n-gram tokenizer keeps in its tokens."""

    LETTER = "letter"
    DIGIT = "digit"
    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"
    SYMBOL = "symbol"


def parse_token_char(value: Any, path: str = "$") -> TokenChar:
    """Decode a token character class tag.

    Raises:
        InvalidEnumValueError: If the tag is not a known character class
    """
    text = expect_str(value, path)
    try:
        return TokenChar(text)
    except ValueError:
        raise InvalidEnumValueError("token character class", text, path) from None


class Ngram(msgspec.Struct, frozen=True, kw_only=True):
    """Parameters of the n-gram tokenizer."""

    min_gram: int
    max_gram: int
    token_chars: tuple[TokenChar, ...] = ()

    def __post_init__(self):
        """Store token_chars as a tuple so equality ignores the input type."""
        if not isinstance(self.token_chars, tuple):
            msgspec.structs.force_setattr(
                self, "token_chars", tuple(self.token_chars)
            )


class TokenizerDefinition(msgspec.Struct, frozen=True, kw_only=True):
    """Base class for the tokenizer union.

    Subclasses set ``type_name`` and implement ``_payload`` and
    ``_from_fields``. Use ``TokenizerDefinition.from_dict`` to decode any
    registered variant.
    """

    type_name: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the settings JSON shape."""
        return {"type": self.type_name, **self._payload()}

    def _payload(self) -> dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def _from_fields(cls, obj: dict[str, Any], path: str) -> "TokenizerDefinition":
        raise NotImplementedError

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "TokenizerDefinition":
        """Decode a tokenizer definition, dispatching on ``type``.

        Args:
            data: Decoded JSON value
            path: Location of the value, used in errors

        Returns:
            The matching TokenizerDefinition variant

        Raises:
            AnalysisDecodeError: If the value does not describe a known
                tokenizer
        """
        obj = expect_object(data, path)
        type_path = child_path(path, "type")
        type_name = expect_str(require(obj, "type", path), type_path)

        variant = TOKENIZER_TYPES.get(type_name)
        if variant is None or not issubclass(variant, cls):
            raise UnrecognizedVariantError("tokenizer", type_name, type_path)

        logger.debug(f"Decoding {type_name} tokenizer at {path}")
        return variant._from_fields(obj, path)


class NgramTokenizer(TokenizerDefinition, frozen=True, kw_only=True):
    """Tokenizer that emits character n-grams."""

    type_name: ClassVar[str] = "ngram"

    ngram: Ngram

    def _payload(self) -> dict[str, Any]:
        return {
            "min_gram": self.ngram.min_gram,
            "max_gram": self.ngram.max_gram,
            "token_chars": [char.value for char in self.ngram.token_chars],
        }

    @classmethod
    def _from_fields(cls, obj: dict[str, Any], path: str) -> "NgramTokenizer":
        chars_path = child_path(path, "token_chars")
        raw_chars = expect_list(require(obj, "token_chars", path), chars_path)

        return cls(
            ngram=Ngram(
                min_gram=stringly_int(
                    require(obj, "min_gram", path), child_path(path, "min_gram")
                ),
                max_gram=stringly_int(
                    require(obj, "max_gram", path), child_path(path, "max_gram")
                ),
                token_chars=tuple(
                    parse_token_char(raw, child_path(chars_path, i))
                    for i, raw in enumerate(raw_chars)
                ),
            )
        )


TOKENIZER_TYPES: dict[str, type[TokenizerDefinition]] = {
    variant.type_name: variant for variant in (NgramTokenizer,)
}
