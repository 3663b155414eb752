"""Shared utilities for the structural linters.

Provides path constants, policy thresholds, source parsing and violation
reporting so individual rule modules only implement their check. Every rule
exposes ``collect_violations(<dir>)`` so it can be pointed at any tree.
"""

from __future__ import annotations

import ast
import sys
import tomllib
import tokenize
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

_POLICY_PATH = ROOT / "linting" / "policy.toml"


def _load_policy() -> dict[str, object]:
    if not _POLICY_PATH.exists():
        return {}
    try:
        return tomllib.loads(_POLICY_PATH.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return {}


def _section(name: str) -> dict[str, object]:
    value = _POLICY.get(name)
    return value if isinstance(value, dict) else {}


_POLICY: dict[str, object] = _load_policy()

SRC_FILE_LINES: int = int(_section("limits").get("src_file_lines", 200))  # type: ignore[arg-type]

SRC_DIR: Path = ROOT / str(_section("paths").get("src", "envconfig"))
TESTS_DIR: Path = ROOT / str(_section("paths").get("tests", "tests"))
CONFIG_DIR: Path = ROOT / str(_section("paths").get("config", "envconfig/config"))


def rel(path: Path) -> str:
    """Return *path* relative to the project root when possible."""
    try:
        return str(path.relative_to(ROOT))
    except ValueError:
        return str(path)


def iter_python_files(*dirs: Path) -> list[Path]:
    """Return sorted .py files under *dirs*, skipping ``__pycache__``."""
    files: list[Path] = []
    for directory in dirs:
        if not directory.is_dir():
            continue
        files.extend(py for py in sorted(directory.rglob("*.py")) if "__pycache__" not in py.parts)
    return files


def parse_source(filepath: Path) -> ast.Module | None:
    """Parse a Python file, returning ``None`` when it cannot be read or parsed."""
    try:
        return ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return None


def comment_lines(filepath: Path) -> set[int]:
    """Return 1-based line numbers that hold only a comment."""
    comments: set[int] = set()
    try:
        with filepath.open("rb") as handle:
            for tok in tokenize.tokenize(handle.readline):
                if tok.type == tokenize.COMMENT and tok.line.lstrip().startswith("#"):
                    comments.add(tok.start[0])
    except tokenize.TokenError:
        pass
    return comments


def docstring_lines(tree: ast.AST) -> set[int]:
    """Return 1-based line numbers occupied by module/class/function docstrings."""
    lines: set[int] = set()
    for node in ast.walk(tree):
        if not isinstance(node, ast.Module | ast.ClassDef | ast.FunctionDef | ast.AsyncFunctionDef):
            continue
        body = getattr(node, "body", None)
        if not body:
            continue
        first = body[0]
        if isinstance(first, ast.Expr) and isinstance(first.value, ast.Constant) and isinstance(first.value.value, str):
            lines.update(range(first.lineno, first.end_lineno + 1))
    return lines


def report(header: str, violations: list[str]) -> int:
    """Print *violations* to stderr under *header* and return an exit code."""
    if not violations:
        return 0
    print(f"{header}:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1
