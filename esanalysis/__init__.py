"""Typed models for search index analysis settings.

Build analyzers, tokenizers, and token filters as immutable values,
serialize them to the JSON an index-settings API expects, and decode the
same JSON (including loosely typed values) back into those values.
"""

from .analysis import Analysis, AnalyzerDefinition, TokenFilterRef
from .codec import (
    analysis_from_index_settings,
    decode_analysis,
    dump_analysis_file,
    encode_analysis,
    index_settings_with_analysis,
    load_analysis_file,
)
from .exceptions import (
    AnalysisDecodeError,
    InvalidEnumValueError,
    MalformedDocumentError,
    MissingFieldError,
    TypeMismatchError,
    UnrecognizedVariantError,
)
from .filters import (
    TOKEN_FILTER_TYPES,
    ApostropheFilter,
    LowercaseFilter,
    ReverseFilter,
    Shingle,
    ShingleFilter,
    SnowballFilter,
    TokenFilterDefinition,
    UppercaseFilter,
)
from .languages import Language, language_from_text, language_to_text, parse_language
from .tokenizers import (
    TOKENIZER_TYPES,
    Ngram,
    NgramTokenizer,
    TokenChar,
    TokenizerDefinition,
    parse_token_char,
)

__version__ = "0.1.0"

__all__ = [
    "Analysis",
    "AnalyzerDefinition",
    "TokenFilterRef",
    "TokenizerDefinition",
    "NgramTokenizer",
    "Ngram",
    "TokenChar",
    "TOKENIZER_TYPES",
    "TokenFilterDefinition",
    "LowercaseFilter",
    "UppercaseFilter",
    "ApostropheFilter",
    "ReverseFilter",
    "SnowballFilter",
    "ShingleFilter",
    "Shingle",
    "TOKEN_FILTER_TYPES",
    "Language",
    "language_to_text",
    "language_from_text",
    "parse_language",
    "parse_token_char",
    "AnalysisDecodeError",
    "MissingFieldError",
    "UnrecognizedVariantError",
    "InvalidEnumValueError",
    "TypeMismatchError",
    "MalformedDocumentError",
    "encode_analysis",
    "decode_analysis",
    "load_analysis_file",
    "dump_analysis_file",
    "analysis_from_index_settings",
    "index_settings_with_analysis",
]
