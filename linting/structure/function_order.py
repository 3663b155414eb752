"""Enforce private-before-public ordering of top-level functions.

Within each source file every ``_``-prefixed top-level function must appear
before the first public one. Methods and nested functions are not checked.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from linting.shared import SRC_DIR, rel, report, parse_source, iter_python_files


def _first_misplaced(tree: ast.Module) -> tuple[ast.AST, ast.AST] | None:
    first_public: ast.FunctionDef | ast.AsyncFunctionDef | None = None
    for node in tree.body:
        if not isinstance(node, ast.FunctionDef | ast.AsyncFunctionDef):
            continue
        if not node.name.startswith("_"):
            first_public = first_public or node
        elif first_public is not None:
            return node, first_public
    return None


def collect_violations(src_dir: Path = SRC_DIR) -> list[str]:
    violations: list[str] = []
    for py_file in iter_python_files(src_dir):
        tree = parse_source(py_file)
        if tree is None:
            continue
        misplaced = _first_misplaced(tree)
        if misplaced is not None:
            private, public = misplaced
            violations.append(
                f"  {rel(py_file)}: private {private.name}() at line {private.lineno} "
                f"appears after public {public.name}() at line {public.lineno}"
            )
    return violations


def main() -> int:
    return report("Function-order violations (private before public)", collect_violations())


if __name__ == "__main__":
    sys.exit(main())
