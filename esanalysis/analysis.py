"""Analyzer definitions and the analysis settings aggregate.

The Analysis value corresponds to the ``analysis`` object of an index's
settings::

    {
        "analyzer": {"my_analyzer": {"tokenizer": "...", "filter": [...]}},
        "tokenizer": {"my_tokenizer": {"type": "ngram", ...}},
        "filter": {"my_filter": {"type": "shingle", ...}}
    }

Names are opaque: an analyzer may reference tokenizers and filters that
are built into the search engine, so references are never resolved
against the mappings here.
"""

import logging
from typing import Any

import msgspec
import msgspec.structs

from .decoding import child_path, expect_list, expect_object, expect_str, require
from .exceptions import TypeMismatchError
from .filters import TokenFilterDefinition
from .tokenizers import TokenizerDefinition

logger = logging.getLogger(__name__)

# A filter chain element: either a filter name or an inline definition.
TokenFilterRef = str | TokenFilterDefinition


class AnalyzerDefinition(msgspec.Struct, frozen=True, kw_only=True):
    """A custom analyzer: a tokenizer followed by an ordered filter chain.

    The filter chain is applied in order, so its sequence is significant
    and is preserved through serialization.
    """

    tokenizer: str | None = None
    filter: tuple[TokenFilterRef, ...] = ()

    def __post_init__(self):
        """Store the filter chain as a tuple so equality ignores the input type."""
        if not isinstance(self.filter, tuple):
            msgspec.structs.force_setattr(self, "filter", tuple(self.filter))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the settings JSON shape.

        The ``tokenizer`` key is omitted entirely when unset.
        """
        data: dict[str, Any] = {}
        if self.tokenizer is not None:
            data["tokenizer"] = self.tokenizer
        data["filter"] = [
            ref if isinstance(ref, str) else ref.to_dict() for ref in self.filter
        ]
        return data

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "AnalyzerDefinition":
        """Decode an analyzer definition.

        Args:
            data: Decoded JSON value
            path: Location of the value, used in errors

        Returns:
            New AnalyzerDefinition instance
        """
        obj = expect_object(data, path)

        tokenizer = obj.get("tokenizer")
        if tokenizer is not None:
            tokenizer = expect_str(tokenizer, child_path(path, "tokenizer"))

        refs: list[TokenFilterRef] = []
        raw_filter = obj.get("filter")
        if raw_filter is not None:
            filter_path = child_path(path, "filter")
            for i, item in enumerate(expect_list(raw_filter, filter_path)):
                item_path = child_path(filter_path, i)
                if isinstance(item, str):
                    refs.append(item)
                elif isinstance(item, dict):
                    refs.append(TokenFilterDefinition.from_dict(item, item_path))
                else:
                    raise TypeMismatchError(
                        "filter name or definition", item, item_path
                    )

        return cls(tokenizer=tokenizer, filter=tuple(refs))


class Analysis(msgspec.Struct, frozen=True, kw_only=True):
    """Named analyzers, tokenizers and token filters of an index."""

    analyzer: dict[str, AnalyzerDefinition]
    tokenizer: dict[str, TokenizerDefinition] = msgspec.field(default_factory=dict)
    token_filter: dict[str, TokenFilterDefinition] = msgspec.field(
        default_factory=dict
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the settings JSON shape.

        All three sections are always present; empty sections become ``{}``.
        """
        return {
            "analyzer": {
                name: analyzer.to_dict() for name, analyzer in self.analyzer.items()
            },
            "tokenizer": {
                name: tokenizer.to_dict()
                for name, tokenizer in self.tokenizer.items()
            },
            "filter": {
                name: token_filter.to_dict()
                for name, token_filter in self.token_filter.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Any, path: str = "$") -> "Analysis":
        """Decode analysis settings.

        Only ``analyzer`` is required; missing or null ``tokenizer`` and
        ``filter`` sections decode as empty.

        Raises:
            MissingFieldError: If ``analyzer`` is absent
            AnalysisDecodeError: If any nested definition is invalid
        """
        obj = expect_object(data, path)
        analyzers = _decode_section(
            require(obj, "analyzer", path),
            child_path(path, "analyzer"),
            AnalyzerDefinition.from_dict,
        )
        tokenizers = _decode_section(
            obj.get("tokenizer"),
            child_path(path, "tokenizer"),
            TokenizerDefinition.from_dict,
        )
        token_filters = _decode_section(
            obj.get("filter"),
            child_path(path, "filter"),
            TokenFilterDefinition.from_dict,
        )

        logger.debug(
            f"Decoded analysis at {path}: {len(analyzers)} analyzers, "
            f"{len(tokenizers)} tokenizers, {len(token_filters)} filters"
        )
        return cls(
            analyzer=analyzers, tokenizer=tokenizers, token_filter=token_filters
        )


def _decode_section(data: Any, path: str, decode) -> dict[str, Any]:
    """Decode a name-keyed section; null or absent gives an empty mapping."""
    if data is None:
        return {}
    section = expect_object(data, path)
    return {
        name: decode(value, child_path(path, name)) for name, value in section.items()
    }
