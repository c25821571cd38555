"""Token filter definitions for custom analyzers.

Token filters form a closed, tagged union keyed by the ``type`` field:

- lowercase / uppercase: case folding, optionally language specific
- apostrophe: strips everything after an apostrophe
- reverse: reverses each token
- snowball: stemming for a required language
- shingle: word n-grams configured by a Shingle record

Each variant knows its own wire payload; TOKEN_FILTER_TYPES maps the
``type`` tag back to the variant class for decoding.
"""

import logging
from typing import Any, ClassVar

import msgspec

from .decoding import (
    child_path,
    expect_object,
    expect_str,
    optional_bool,
    optional_int,
    optional_str,
    require,
)
from .exceptions import UnrecognizedVariantError
from .languages import Language, language_to_text, parse_language

logger = logging.getLogger(__name__)


class Shingle(msgspec.Struct, frozen=True, kw_only=True):
    """Settings of the shingle (word n-gram) token filter."""

    max_size: int = 2
    min_size: int = 2
    output_unigrams: bool = True
    output_unigrams_if_no_shingles: bool = False
    token_separator: str = " "
    filler_token: str = "_"


class TokenFilterDefinition(msgspec.Struct, frozen=True, kw_only=True):
    """Base class for the token filter union."""

    type_name: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the settings JSON shape."""
        return {"type": self.type_name, **self._payload()}

    def _payload(self) -> dict[str, Any]:
        return {}

    @classmethod
    def _from_fields(cls, obj: dict[str, Any], path: str) -> "TokenFilterDefinition":
        return cls()

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "TokenFilterDefinition":
        """Decode a token filter definition, dispatching on ``type``.

        Args:
            data: Decoded JSON value
            path: Location of the value, used in errors

        Returns:
            The matching TokenFilterDefinition variant

        Raises:
            AnalysisDecodeError: If the value does not describe a known
                token filter
        """
        obj = expect_object(data, path)
        type_path = child_path(path, "type")
        type_name = expect_str(require(obj, "type", path), type_path)

        variant = TOKEN_FILTER_TYPES.get(type_name)
        if variant is None or not issubclass(variant, cls):
            raise UnrecognizedVariantError("token filter", type_name, type_path)

        logger.debug(f"Decoding {type_name} token filter at {path}")
        return variant._from_fields(obj, path)


def _optional_language(obj: dict[str, Any], path: str) -> Language | None:
    value = obj.get("language")
    if value is None:
        return None
    return parse_language(value, child_path(path, "language"))


class LowercaseFilter(TokenFilterDefinition, frozen=True, kw_only=True):
    """Lowercases tokens, with optional language-specific rules."""

    type_name: ClassVar[str] = "lowercase"

    language: Language | None = None

    def _payload(self) -> dict[str, Any]:
        if self.language is None:
            return {}
        return {"language": language_to_text(self.language)}

    @classmethod
    def _from_fields(cls, obj: dict[str, Any], path: str) -> "LowercaseFilter":
        return cls(language=_optional_language(obj, path))


class UppercaseFilter(TokenFilterDefinition, frozen=True, kw_only=True):
    """Uppercases tokens, with optional language-specific rules."""

    type_name: ClassVar[str] = "uppercase"

    language: Language | None = None

    def _payload(self) -> dict[str, Any]:
        if self.language is None:
            return {}
        return {"language": language_to_text(self.language)}

    @classmethod
    def _from_fields(cls, obj: dict[str, Any], path: str) -> "UppercaseFilter":
        return cls(language=_optional_language(obj, path))


class ApostropheFilter(TokenFilterDefinition, frozen=True, kw_only=True):
    type_name: ClassVar[str] = "apostrophe"


class ReverseFilter(TokenFilterDefinition, frozen=True, kw_only=True):
    type_name: ClassVar[str] = "reverse"


class SnowballFilter(TokenFilterDefinition, frozen=True, kw_only=True):
    """Snowball stemmer for a specific language."""

    type_name: ClassVar[str] = "snowball"

    language: Language

    def _payload(self) -> dict[str, Any]:
        return {"language": language_to_text(self.language)}

    @classmethod
    def _from_fields(cls, obj: dict[str, Any], path: str) -> "SnowballFilter":
        language = require(obj, "language", path)
        return cls(language=parse_language(language, child_path(path, "language")))


class ShingleFilter(TokenFilterDefinition, frozen=True, kw_only=True):
    """Emits shingles; every setting is written out even at its default."""

    type_name: ClassVar[str] = "shingle"

    shingle: Shingle = msgspec.field(default_factory=Shingle)

    def _payload(self) -> dict[str, Any]:
        s = self.shingle
        return {
            "max_shingle_size": s.max_size,
            "min_shingle_size": s.min_size,
            "output_unigrams": s.output_unigrams,
            "output_unigrams_if_no_shingles": s.output_unigrams_if_no_shingles,
            "token_separator": s.token_separator,
            "filler_token": s.filler_token,
        }

    @classmethod
    def _from_fields(cls, obj: dict[str, Any], path: str) -> "ShingleFilter":
        defaults = Shingle()
        return cls(
            shingle=Shingle(
                max_size=optional_int(
                    obj, "max_shingle_size", defaults.max_size, path
                ),
                min_size=optional_int(
                    obj, "min_shingle_size", defaults.min_size, path
                ),
                output_unigrams=optional_bool(
                    obj, "output_unigrams", defaults.output_unigrams, path
                ),
                output_unigrams_if_no_shingles=optional_bool(
                    obj,
                    "output_unigrams_if_no_shingles",
                    defaults.output_unigrams_if_no_shingles,
                    path,
                ),
                token_separator=optional_str(
                    obj, "token_separator", defaults.token_separator, path
                ),
                filler_token=optional_str(
                    obj, "filler_token", defaults.filler_token, path
                ),
            )
        )


TOKEN_FILTER_TYPES: dict[str, type[TokenFilterDefinition]] = {
    variant.type_name: variant
    for variant in (
        LowercaseFilter,
        UppercaseFilter,
        ApostropheFilter,
        ReverseFilter,
        SnowballFilter,
        ShingleFilter,
    )
}
