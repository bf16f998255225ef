"""Self-test harness for update-notifier."""

from __future__ import annotations

import sys

from .models import UpdateInfo
from .renderer import render
from .version_gate import should_notify

# (current, latest, automated, override, expected)
GATE_CASES = [
    ("0.0.2", "1.0.0", False, False, True),
    ("1.0.0", "1.0.0", False, False, False),
    ("1.0.1", "1.0.0", False, False, False),
    ("0.0.2", "1.0.0", True, False, False),
    ("0.0.2", "1.0.0", True, True, True),
    ("not-a-version", "1.0.0", False, False, False),
]


def run_selftest() -> bool:
    """Lightweight self-test.

    Checks:
    1. Version gate decisions for known cases.
    2. Default notice renders with the expected lines and box width.
    """
    ok = True

    for current, latest, automated, override, expected in GATE_CASES:
        got = should_notify(current, latest, automated, override)
        if got is not expected:
            print(f"[SELFTEST] ERROR: gate({current!r}, {latest!r}, automated={automated}) = {got}, want {expected}")
            ok = False
    if ok:
        print(f"[SELFTEST] Version gate OK ({len(GATE_CASES)} cases).")

    box = render(UpdateInfo("update-notifier-tester", "0.0.2", "1.0.0"), include_global_flag=True, padding=1)
    lines = box.split("\n")
    expected_lines = [
        "Update available 0.0.2 → 1.0.0",
        "Run npm i --location=global update-notifier-tester to update",
    ]
    missing = [line for line in expected_lines if not any(line in row for row in lines)]
    widths = {len(row) for row in lines}
    if missing:
        print(f"[SELFTEST] ERROR: rendered notice is missing {missing}")
        ok = False
    elif widths != {max(len(line) for line in expected_lines) + 4}:
        print(f"[SELFTEST] ERROR: unexpected box widths {sorted(widths)}")
        ok = False
    else:
        print("[SELFTEST] Renderer OK.")

    return ok


def main() -> int:
    """CLI entrypoint for selftest."""
    return 0 if run_selftest() else 1


if __name__ == "__main__":
    sys.exit(main())
