"""Tests for manager summaries."""

from warnkit import __version__
from warnkit.kinds import DISK_WARNING
from warnkit.manager import WarningManager
from warnkit.report import kinds_payload, render_kinds_text, render_text, summary_payload


def _manager():
    manager = WarningManager()
    manager.record("disk low", DISK_WARNING)
    manager.record("slow")
    manager.record("disk low again", DISK_WARNING)
    return manager


class TestSummaryPayload:
    def test_groups(self):
        payload = summary_payload(_manager())
        assert payload["total"] == 3
        assert payload["warnkit_version"] == __version__
        assert payload["groups"] == [
            {
                "kind": "DiskWarning",
                "code": 75,
                "count": 2,
                "messages": ["disk low", "disk low again"],
            },
            {"kind": "Warning", "code": 72, "count": 1, "messages": ["slow"]},
        ]

    def test_empty(self):
        payload = summary_payload(WarningManager())
        assert payload["total"] == 0
        assert payload["groups"] == []


class TestRenderText:
    def test_render(self):
        text = render_text(summary_payload(_manager()))
        assert text.startswith("total: 3\ngroups:\n")
        assert "  - kind: DiskWarning (0x4b)\n    count: 2\n" in text
        assert "    - disk low again\n" in text

    def test_render_empty(self):
        assert render_text(summary_payload(WarningManager())) == "total: 0\ngroups:\n  []\n"


class TestKinds:
    def test_payload(self):
        entries = {entry["name"]: entry for entry in kinds_payload()}
        assert entries["Warning"]["parent"] is None
        assert entries["DiskWarning"] == {
            "name": "DiskWarning",
            "code": 75,
            "parent": "OSWarning",
            "ancestry": ["DiskWarning", "OSWarning", "Warning"],
        }

    def test_text_indents_by_depth(self):
        text = render_kinds_text(kinds_payload())
        assert "Warning (0x48)\n" in text
        assert "\n    DiskWarning (0x4b)\n" in text
        assert "\n  FutureWarning (0x58)\n" in text
