"""Languages accepted by language-aware analyzers and token filters.

Most settings that take a language only support a subset of these values;
consult the search engine's documentation for what a particular filter
actually handles.
"""

from enum import Enum, unique
from typing import Any

from .decoding import expect_str
from .exceptions import InvalidEnumValueError


@unique
class Language(str, Enum):
    """Language identifiers with their lowercase settings tags."""

    ARABIC = "arabic"
    ARMENIAN = "armenian"
    BASQUE = "basque"
    BENGALI = "bengali"
    BRAZILIAN = "brazilian"
    BULGARIAN = "bulgarian"
    CATALAN = "catalan"
    CJK = "cjk"
    CZECH = "czech"
    DANISH = "danish"
    DUTCH = "dutch"
    ENGLISH = "english"
    FINNISH = "finnish"
    FRENCH = "french"
    GALICIAN = "galician"
    GERMAN = "german"
    GERMAN2 = "german2"
    GREEK = "greek"
    HINDI = "hindi"
    HUNGARIAN = "hungarian"
    INDONESIAN = "indonesian"
    IRISH = "irish"
    ITALIAN = "italian"
    KP = "kp"
    LATVIAN = "latvian"
    LITHUANIAN = "lithuanian"
    LOVINS = "lovins"
    NORWEGIAN = "norwegian"
    PERSIAN = "persian"
    PORTER = "porter"
    PORTUGUESE = "portuguese"
    ROMANIAN = "romanian"
    RUSSIAN = "russian"
    SORANI = "sorani"
    SPANISH = "spanish"
    SWEDISH = "swedish"
    THAI = "thai"
    TURKISH = "turkish"


_LANGUAGES_BY_TAG: dict[str, Language] = {lang.value: lang for lang in Language}


def language_to_text(language: Language) -> str:
    """Return the settings tag for a language."""
    return language.value


def language_from_text(text: str) -> Language | None:
    """Look up a language by its settings tag.

    Returns:
        The matching Language, or None if the tag is not recognized
    """
    return _LANGUAGES_BY_TAG.get(text)


def parse_language(value: Any, path: str = "$") -> Language:
    """Decode a JSON language tag.

    Raises:
        TypeMismatchError: If the value is not a string
        InvalidEnumValueError: If the tag is not a supported language
    """
    text = expect_str(value, path)
    language = language_from_text(text)
    if language is None:
        raise InvalidEnumValueError("language", text, path)
    return language
