"""Tests for warning file loading."""

import pytest

from warnkit.errors import ParseError
from warnkit.parser import load_warnings

WARNINGS_YAML = """\
warnings:
  - kind: DiskWarning
    message: disk low
  - message: slow
  - kind: DeprecationWarning
    data:
      feature_type: function
      feature_name: load
      alternative_feature_name: read
  - kind: ConnectionWarning
    message: retrying
    data:
      host: db1
"""


class TestLoadWarnings:
    def test_parse_file(self, tmp_path):
        f = tmp_path / "warnings.yaml"
        f.write_text(WARNINGS_YAML)
        records = load_warnings(f)
        assert [r.kind for r in records] == [
            "DiskWarning",
            "Warning",
            "DeprecationWarning",
            "ConnectionWarning",
        ]
        assert records[0].message == "disk low"
        assert records[2].message == "A function, load, has been deprecated. Use read instead."
        assert records[3].data == {"host": "db1"}

    def test_kind_without_message_uses_default(self):
        records = load_warnings("warnings:\n  - kind: PendingDeprecationWarning\n")
        assert records[0].message == "A feature is pending deprecation."

    def test_empty_list(self):
        assert load_warnings("warnings: []\n") == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParseError, match="Cannot read"):
            load_warnings(tmp_path / "missing.yaml")

    def test_invalid_yaml(self):
        with pytest.raises(ParseError, match="Invalid YAML"):
            load_warnings("{{{{bad yaml")

    def test_non_dict(self):
        with pytest.raises(ParseError, match="mapping"):
            load_warnings("- a\n- b\n")

    def test_unknown_kind(self):
        with pytest.raises(ParseError, match="Unknown warning kind"):
            load_warnings("warnings:\n  - kind: NopeWarning\n    message: x\n")

    def test_unknown_field(self):
        with pytest.raises(ParseError, match="schema validation"):
            load_warnings("warnings:\n  - message: x\n    level: high\n")
