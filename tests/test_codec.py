"""Tests for JSON bytes, files, and index settings helpers."""

import json

import pytest
import yaml

from esanalysis import (
    Analysis,
    MalformedDocumentError,
    MissingFieldError,
    analysis_from_index_settings,
    decode_analysis,
    dump_analysis_file,
    encode_analysis,
    index_settings_with_analysis,
    load_analysis_file,
)


class TestJsonBytes:
    """Test encoding to and decoding from raw JSON."""

    def test_encode_is_compact_by_default(self, sample_analysis):
        raw = encode_analysis(sample_analysis)

        assert isinstance(raw, bytes)
        assert b"\n" not in raw
        assert json.loads(raw) == sample_analysis.to_dict()

    def test_encode_with_indent(self, sample_analysis):
        raw = encode_analysis(sample_analysis, indent=2)

        assert b"\n" in raw
        assert json.loads(raw) == sample_analysis.to_dict()

    def test_decode_bytes_and_text(self, settings_json, sample_analysis):
        text = json.dumps(settings_json)

        assert decode_analysis(text) == sample_analysis
        assert decode_analysis(text.encode()) == sample_analysis

    def test_round_trip(self, sample_analysis):
        assert decode_analysis(encode_analysis(sample_analysis)) == sample_analysis

    def test_malformed_json(self):
        with pytest.raises(MalformedDocumentError):
            decode_analysis(b'{"analyzer": ')

    def test_invalid_utf8_json(self):
        with pytest.raises(MalformedDocumentError):
            decode_analysis(b'{"analyzer": {"\xff": {}}}')

    def test_decode_failure_propagates(self):
        with pytest.raises(MissingFieldError):
            decode_analysis(b"{}")


class TestFiles:
    """Test loading and writing settings files."""

    def test_json_file(self, tmp_path, settings_json, sample_analysis):
        path = tmp_path / "analysis.json"
        path.write_text(json.dumps(settings_json))

        assert load_analysis_file(path) == sample_analysis

    def test_yaml_and_json_agree(self, tmp_path, settings_json):
        json_path = tmp_path / "analysis.json"
        yaml_path = tmp_path / "analysis.yml"
        json_path.write_text(json.dumps(settings_json))
        yaml_path.write_text(yaml.safe_dump(settings_json))

        assert load_analysis_file(yaml_path) == load_analysis_file(json_path)

    def test_dump_json(self, tmp_path, sample_analysis):
        path = tmp_path / "out.json"

        dump_analysis_file(sample_analysis, path)

        assert json.loads(path.read_text()) == sample_analysis.to_dict()
        assert load_analysis_file(path) == sample_analysis

    def test_dump_yaml(self, tmp_path, sample_analysis):
        path = tmp_path / "out.yaml"

        dump_analysis_file(sample_analysis, path)

        assert yaml.safe_load(path.read_text()) == sample_analysis.to_dict()
        assert load_analysis_file(path) == sample_analysis

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("analyzer: [unclosed\n")

        with pytest.raises(MalformedDocumentError):
            load_analysis_file(path)

    def test_invalid_utf8_json_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"analyzer": {"caf\xe9": {}}}')

        with pytest.raises(MalformedDocumentError):
            load_analysis_file(path)

    def test_invalid_utf8_yaml_file(self, tmp_path):
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"analyzer:\n  caf\xe9: {}\n")

        with pytest.raises(MalformedDocumentError):
            load_analysis_file(path)


class TestIndexSettings:
    """Test extracting and embedding analysis in index settings."""

    def test_get_settings_response(self, settings_json, sample_analysis):
        body = {
            "products": {
                "settings": {
                    "index": {
                        "number_of_shards": "1",
                        "analysis": settings_json,
                    }
                }
            }
        }

        assert analysis_from_index_settings(body) == sample_analysis

    @pytest.mark.parametrize(
        "wrap",
        [
            lambda a: {"settings": {"index": {"analysis": a}}},
            lambda a: {"settings": {"analysis": a}},
            lambda a: {"index": {"analysis": a}},
            lambda a: {"analysis": a},
        ],
    )
    def test_bare_envelopes(self, wrap, settings_json, sample_analysis):
        assert analysis_from_index_settings(wrap(settings_json)) == sample_analysis

    def test_no_analysis_block(self):
        body = {"products": {"settings": {"index": {"number_of_shards": "1"}}}}

        assert analysis_from_index_settings(body) is None

    def test_error_path_includes_envelope(self):
        body = {"settings": {"index": {"analysis": {"tokenizer": {}}}}}

        with pytest.raises(MissingFieldError) as exc_info:
            analysis_from_index_settings(body)

        assert exc_info.value.path == "$.settings.index.analysis"

    def test_create_index_body(self, sample_analysis):
        body = index_settings_with_analysis(
            sample_analysis, {"number_of_shards": 3, "number_of_replicas": 1}
        )

        assert body == {
            "settings": {
                "number_of_shards": 3,
                "number_of_replicas": 1,
                "analysis": sample_analysis.to_dict(),
            }
        }
        assert analysis_from_index_settings(body) == sample_analysis

    def test_create_index_body_without_extra_settings(self):
        analysis = Analysis(analyzer={})

        assert index_settings_with_analysis(analysis) == {
            "settings": {"analysis": {"analyzer": {}, "tokenizer": {}, "filter": {}}}
        }
