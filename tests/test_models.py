"""Tests for the WarningRecord model."""

import pytest
from pydantic import ValidationError

from warnkit.kinds import DISK_WARNING, OS_WARNING, WARNING, register_kind
from warnkit.models import WarningRecord


class TestWarningRecord:
    def test_defaults(self):
        record = WarningRecord(message="Something is causing performance issues.")
        assert record.kind == "Warning"
        assert record.code == 72
        assert record.data is None

    def test_code_from_kind(self):
        assert WarningRecord(kind="DiskWarning", message="x").code == 75

    def test_explicit_code_kept(self):
        assert WarningRecord(kind="DiskWarning", message="x", code=7).code == 7

    def test_kind_object_accepted(self):
        assert WarningRecord(kind=OS_WARNING, message="x").kind == "OSWarning"

    def test_unknown_kind(self):
        with pytest.raises(ValidationError, match="Unknown warning kind"):
            WarningRecord(kind="NopeWarning", message="x")

    def test_negative_code(self):
        with pytest.raises(ValidationError):
            WarningRecord(message="x", code=-1)

    def test_extra_forbidden(self):
        with pytest.raises(ValidationError):
            WarningRecord(message="x", severity="high")

    def test_frozen(self):
        record = WARNING("x")
        with pytest.raises(ValidationError):
            record.message = "y"

    def test_str(self):
        record = WARNING("Something is causing performance issues.")
        assert str(record) == "Warning: Something is causing performance issues."
        assert f"{record}" == "Warning: Something is causing performance issues."

    def test_int(self):
        assert int(DISK_WARNING("x")) == 75

    def test_is_a(self):
        record = DISK_WARNING("x")
        assert record.is_a(OS_WARNING)
        assert record.is_a("Warning")
        assert not record.is_a("MemoryWarning")

    def test_kind_info(self):
        assert DISK_WARNING("x").kind_info is DISK_WARNING

    def test_custom_kind(self):
        custom = register_kind("ModelTestWarning", 0x70)
        record = WarningRecord(kind="ModelTestWarning", message="x")
        assert record.code == 0x70
        assert record.kind_info is custom


class TestPayloadImmutability:
    def test_data_is_read_only(self):
        record = DISK_WARNING("x", {"free_mb": 12})
        with pytest.raises(TypeError):
            record.data["free_mb"] = 0
        assert record.data == {"free_mb": 12}

    def test_nested_data_is_read_only(self):
        record = WarningRecord(message="x", data={"hosts": ["a", "b"], "meta": {"zone": "eu"}})
        assert record.data["hosts"] == ("a", "b")
        with pytest.raises(TypeError):
            record.data["meta"]["zone"] = "us"
        with pytest.raises(AttributeError):
            record.data["hosts"].append("c")

    def test_dump_returns_plain_containers(self):
        record = WarningRecord(message="x", data={"hosts": ["a"], "meta": {"zone": "eu"}})
        dumped = record.model_dump()
        assert dumped["data"] == {"hosts": ["a"], "meta": {"zone": "eu"}}
        assert type(dumped["data"]) is dict
        assert type(dumped["data"]["hosts"]) is list
