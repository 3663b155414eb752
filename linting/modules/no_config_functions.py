"""Enforce purely declarative config modules.

Modules under envconfig/config/ hold constants only; functions belong in the
runtime modules that use them.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from linting.shared import CONFIG_DIR, rel, report, parse_source


def collect_violations(config_dir: Path = CONFIG_DIR) -> list[str]:
    violations: list[str] = []
    if not config_dir.is_dir():
        return violations
    for py_file in sorted(config_dir.glob("*.py")):
        tree = parse_source(py_file) if py_file.name != "__init__.py" else None
        if tree is None:
            continue
        violations.extend(
            f"  {rel(py_file)}: def {node.name}() (line {node.lineno})"
            for node in tree.body
            if isinstance(node, ast.FunctionDef | ast.AsyncFunctionDef)
        )
    return violations


def main() -> int:
    return report("No-config-functions violations (config/ must be declarative)", collect_violations())


if __name__ == "__main__":
    sys.exit(main())
