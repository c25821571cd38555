"""Wire, file, and index-settings helpers for analysis values.

The models in this package convert to and from JSON builtins; this module
handles the surrounding formats: raw JSON bytes as exchanged with the
search engine, JSON/YAML files on disk, and the index settings envelopes
that contain an ``analysis`` block.
"""

import logging
from pathlib import Path
from typing import Any

import msgspec
import yaml

from .analysis import Analysis
from .decoding import child_path, expect_object
from .exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def encode_analysis(analysis: Analysis, indent: int = 0) -> bytes:
    """Serialize analysis settings to JSON bytes.

    Args:
        analysis: Value to serialize
        indent: Pretty-print indentation, 0 for compact output

    Returns:
        UTF-8 encoded JSON
    """
    raw = msgspec.json.encode(analysis.to_dict())
    if indent:
        raw = msgspec.json.format(raw, indent=indent)
    return raw


def decode_analysis(raw: bytes | str) -> Analysis:
    """Parse analysis settings from JSON bytes or text.

    Raises:
        MalformedDocumentError: If the input is not valid UTF-8 JSON
        AnalysisDecodeError: If the JSON does not describe analysis settings
    """
    try:
        data = msgspec.json.decode(raw)
    except (msgspec.DecodeError, UnicodeError) as e:
        raise MalformedDocumentError(f"invalid JSON: {e}") from e
    return Analysis.from_dict(data)


def load_analysis_file(path: Path) -> Analysis:
    """Load analysis settings from a JSON or YAML file.

    The format is chosen by file suffix; anything other than ``.yaml`` or
    ``.yml`` is read as JSON.
    """
    path = Path(path)
    logger.debug(f"Loading analysis settings from {path}")

    if path.suffix.lower() in YAML_SUFFIXES:
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except (yaml.YAMLError, UnicodeError) as e:
                raise MalformedDocumentError(f"invalid YAML in {path}: {e}") from e
        return Analysis.from_dict(data)

    return decode_analysis(path.read_bytes())


def dump_analysis_file(analysis: Analysis, path: Path, indent: int = 2) -> None:
    """Write analysis settings to a JSON or YAML file, chosen by suffix."""
    path = Path(path)

    if path.suffix.lower() in YAML_SUFFIXES:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(analysis.to_dict(), f, sort_keys=False)
    else:
        path.write_bytes(encode_analysis(analysis, indent=indent) + b"\n")

    logger.info(f"Wrote analysis settings to {path}")


def analysis_from_index_settings(body: Any) -> Analysis | None:
    """Extract the analysis block from an index settings document.

    Accepts a get-settings response keyed by index name as well as the
    bare ``settings`` or ``index`` objects inside it.

    Returns:
        The decoded Analysis, or None if the document has no analysis block
    """
    found = _find_analysis(expect_object(body, "$"), "$")
    if found is None:
        logger.debug("No analysis block found in index settings")
        return None

    block, path = found
    return Analysis.from_dict(block, path)


def _find_analysis(obj: dict[str, Any], path: str) -> tuple[Any, str] | None:
    if "analysis" in obj:
        return obj["analysis"], child_path(path, "analysis")

    for key in ("settings", "index"):
        if isinstance(obj.get(key), dict):
            return _find_analysis(obj[key], child_path(path, key))

    # A get-settings response wraps everything in the index name
    if len(obj) == 1:
        name, value = next(iter(obj.items()))
        if isinstance(value, dict):
            return _find_analysis(value, child_path(path, name))

    return None


def index_settings_with_analysis(
    analysis: Analysis, settings: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Build a create-index body carrying the given analysis settings.

    Args:
        analysis: Analysis settings to embed
        settings: Other index settings to keep, e.g. shard counts

    Returns:
        Body of the form ``{"settings": {..., "analysis": {...}}}``
    """
    merged = dict(settings or {})
    merged["analysis"] = analysis.to_dict()
    return {"settings": merged}
