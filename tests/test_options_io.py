"""Tests for ReaderOptions and the YAML load/save helpers."""

import pytest

from simplecsv.core.options_io import (
    ReaderOptions,
    dump_options,
    load_options,
    options_from_dict,
    save_options,
)


class TestReaderOptions:

    def test_defaults(self):
        opts = ReaderOptions()
        assert opts.delimiter == ","
        assert opts.quote_char == '"'
        assert opts.gzipped is False
        assert opts.lines_to_skip == 0
        assert opts.skip_empty_values is False
        assert opts.encoding == "utf-8-sig"

    def test_empty_quote_disables_quoting(self):
        assert ReaderOptions(quote_char="").quote_char is None

    @pytest.mark.parametrize("kwargs", [
        {"delimiter": ""},
        {"delimiter": "ab"},
        {"lines_to_skip": -1},
        {"delimiter": "'", "quote_char": "'"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ReaderOptions(**kwargs)


class TestLoadOptions:

    def test_from_yaml_text(self):
        text = "delimiter: '|'\nquote_char: null\nlines_to_skip: 2\nskip_empty_values: true\n"
        opts = load_options(text)
        assert opts == ReaderOptions(delimiter="|", quote_char=None, lines_to_skip=2, skip_empty_values=True)

    def test_from_json_bytes(self):
        opts = load_options(b'{"delimiter": ";", "gzipped": "yes"}')
        assert opts.delimiter == ";"
        assert opts.gzipped is True

    def test_from_dict_ignores_unknown_keys(self):
        opts = options_from_dict({"delimiter": "\t", "colour": "blue"})
        assert opts.delimiter == "\t"

    def test_missing_keys_take_defaults(self):
        assert load_options("encoding: latin-1\n") == ReaderOptions(encoding="latin-1")

    def test_empty_text(self):
        assert load_options("   ") == ReaderOptions()

    def test_passthrough(self):
        opts = ReaderOptions(delimiter="|")
        assert load_options(opts) is opts

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            load_options(42)

    def test_non_mapping_document(self):
        with pytest.raises(TypeError):
            load_options("- a\n- b\n")

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            load_options({"delimiter": "||"})


class TestSaveOptions:

    def test_save_and_load_file(self, tmp_path):
        opts = ReaderOptions(delimiter="\t", quote_char=None, gzipped=True, lines_to_skip=3)
        path = tmp_path / "options.yaml"
        save_options(opts, path)
        assert load_options(path) == opts
        assert load_options(str(path)) == opts

    def test_dump_keeps_field_order(self):
        text = dump_options(ReaderOptions())
        keys = [line.split(":")[0] for line in text.splitlines()]
        assert keys == ["delimiter", "quote_char", "gzipped", "lines_to_skip", "skip_empty_values", "encoding"]
