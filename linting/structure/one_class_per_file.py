"""Enforce at most one top-level non-dataclass class per source file."""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from linting.shared import SRC_DIR, rel, report, parse_source, iter_python_files


def _is_dataclass_decorator(decorator: ast.expr) -> bool:
    target = decorator.func if isinstance(decorator, ast.Call) else decorator
    if isinstance(target, ast.Name):
        return target.id == "dataclass"
    return isinstance(target, ast.Attribute) and target.attr == "dataclass"


def top_level_classes(tree: ast.Module) -> list[str]:
    """Names of top-level classes that are not dataclasses."""
    return [
        node.name
        for node in tree.body
        if isinstance(node, ast.ClassDef) and not any(_is_dataclass_decorator(d) for d in node.decorator_list)
    ]


def collect_violations(src_dir: Path = SRC_DIR) -> list[str]:
    violations: list[str] = []
    for py_file in iter_python_files(src_dir):
        tree = parse_source(py_file)
        classes = top_level_classes(tree) if tree is not None else []
        if len(classes) > 1:
            violations.append(f"  {rel(py_file)}: {len(classes)} classes ({', '.join(classes)})")
    return violations


def main() -> int:
    return report("One non-dataclass-class-per-file violations", collect_violations())


if __name__ == "__main__":
    sys.exit(main())
