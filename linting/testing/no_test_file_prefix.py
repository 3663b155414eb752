"""Enforce plain test filenames under tests/unit/.

Tests use names like ``duration_parsing.py`` rather than
``test_duration_parsing.py``; tests/conftest.py collects them.
"""

from __future__ import annotations

import sys
from pathlib import Path

from linting.shared import TESTS_DIR, rel, report, iter_python_files


def collect_violations(tests_dir: Path = TESTS_DIR) -> list[str]:
    return [
        f"  {rel(py_file)}: filename must not use test_ prefix"
        for py_file in iter_python_files(tests_dir / "unit")
        if py_file.name.startswith("test_")
    ]


def main() -> int:
    return report("No-test-file-prefix violations (use plain names, not test_*)", collect_violations())


if __name__ == "__main__":
    sys.exit(main())
