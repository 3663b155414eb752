"""Enforce a maximum code-line count per envconfig source file.

Blank lines, comment-only lines and docstrings are not counted. Barrel
``__init__.py`` files (imports, ``__all__`` and docstrings only) are exempt.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from linting.shared import (
    SRC_DIR,
    SRC_FILE_LINES,
    rel,
    report,
    parse_source,
    comment_lines,
    docstring_lines,
    iter_python_files,
)


def _is_barrel_statement(node: ast.stmt) -> bool:
    if isinstance(node, ast.Import | ast.ImportFrom | ast.Pass):
        return True
    if isinstance(node, ast.Expr) and isinstance(node.value, ast.Constant):
        return True
    if isinstance(node, ast.Assign):
        return [getattr(target, "id", None) for target in node.targets] == ["__all__"]
    return False


def _is_barrel_init(filepath: Path, tree: ast.Module) -> bool:
    return filepath.name == "__init__.py" and all(_is_barrel_statement(node) for node in tree.body)


def count_code_lines(filepath: Path, tree: ast.Module) -> int:
    """Count non-blank lines that are neither comments nor docstrings."""
    skipped = comment_lines(filepath) | docstring_lines(tree)
    lines = filepath.read_text(encoding="utf-8").splitlines()
    return sum(1 for number, line in enumerate(lines, start=1) if line.strip() and number not in skipped)


def collect_violations(src_dir: Path = SRC_DIR, limit: int = SRC_FILE_LINES) -> list[str]:
    violations: list[str] = []
    for py_file in iter_python_files(src_dir):
        tree = parse_source(py_file)
        if tree is None or _is_barrel_init(py_file, tree):
            continue
        code_lines = count_code_lines(py_file, tree)
        if code_lines > limit:
            violations.append(f"  {rel(py_file)}: {code_lines} code lines (limit {limit})")
    return violations


def main() -> int:
    return report("File length violations", collect_violations())


if __name__ == "__main__":
    sys.exit(main())
