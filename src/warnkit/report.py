"""Summaries of the warnings held by a manager."""

from __future__ import annotations

from warnkit import __version__
from warnkit.kinds import ancestry, known_kinds
from warnkit.manager import WarningManager

REPORT_SCHEMA_VERSION = 1


def summary_payload(manager: WarningManager) -> dict[str, object]:
    """Build a JSON-serializable summary grouped by kind.

    Groups are ordered by the first occurrence of each kind.
    """
    groups = []
    for kind, records in manager.group_by_kind().items():
        groups.append(
            {
                "kind": kind,
                "code": records[0].code,
                "count": len(records),
                "messages": [record.message for record in records],
            }
        )
    return {
        "report_schema_version": REPORT_SCHEMA_VERSION,
        "warnkit_version": __version__,
        "total": manager.count,
        "groups": groups,
    }


def render_text(payload: dict[str, object]) -> str:
    """Render human-readable text output for a summary payload."""
    lines: list[str] = [f"total: {payload['total']}", "groups:"]
    groups = payload.get("groups", [])
    if isinstance(groups, list) and groups:
        for group in groups:
            lines.append(f"  - kind: {group['kind']} (0x{group['code']:x})")
            lines.append(f"    count: {group['count']}")
            for message in group["messages"]:
                lines.append(f"    - {message}")
    else:
        lines.append("  []")
    return "\n".join(lines) + "\n"


def kinds_payload() -> list[dict[str, object]]:
    """Describe the kind table, one entry per registered kind."""
    return [
        {
            "name": kind.name,
            "code": kind.code,
            "parent": kind.parent.name if kind.parent is not None else None,
            "ancestry": list(ancestry(kind)),
        }
        for kind in known_kinds()
    ]


def render_kinds_text(entries: list[dict[str, object]]) -> str:
    lines = []
    for entry in entries:
        depth = len(entry["ancestry"]) - 1
        lines.append(f"{'  ' * depth}{entry['name']} (0x{entry['code']:x})")
    return "\n".join(lines) + "\n"
