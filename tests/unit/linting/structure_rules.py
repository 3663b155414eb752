"""Unit tests for the structural lint rules against synthetic trees."""

from __future__ import annotations

from pathlib import Path

from linting.modules import no_config_functions
from linting.testing import no_test_file_prefix, unit_test_domain_folders
from linting.structure import file_length, function_order, one_class_per_file


def _write(path: Path, source: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


def test_file_length_ignores_comments_and_docstrings(tmp_path: Path) -> None:
    _write(tmp_path / "short.py", '"""Doc."""\n\n# comment\nA = 1\nB = 2\n')
    _write(tmp_path / "long.py", "\n".join(f"V{i} = {i}" for i in range(5)) + "\n")
    violations = file_length.collect_violations(tmp_path, limit=3)
    assert len(violations) == 1
    assert "long.py: 5 code lines (limit 3)" in violations[0]


def test_file_length_exempts_barrel_init(tmp_path: Path) -> None:
    imports = "\n".join(f"from .m{i} import x{i}" for i in range(10))
    _write(tmp_path / "pkg" / "__init__.py", f'"""Pkg."""\n{imports}\n__all__ = ["x0"]\n')
    assert file_length.collect_violations(tmp_path, limit=3) == []


def test_function_order_flags_private_after_public(tmp_path: Path) -> None:
    _write(tmp_path / "good.py", "def _helper():\n    pass\n\n\ndef run():\n    pass\n")
    _write(tmp_path / "bad.py", "def run():\n    pass\n\n\ndef _helper():\n    pass\n")
    violations = function_order.collect_violations(tmp_path)
    assert len(violations) == 1
    assert "bad.py: private _helper() at line 5 appears after public run() at line 1" in violations[0]


def test_one_class_per_file_allows_dataclasses(tmp_path: Path) -> None:
    _write(
        tmp_path / "kinds.py",
        "from dataclasses import dataclass\n\n\n"
        "@dataclass(frozen=True)\nclass A:\n    pass\n\n\n"
        "@dataclass\nclass B:\n    pass\n\n\n"
        "class C:\n    pass\n",
    )
    _write(tmp_path / "two.py", "class C:\n    pass\n\n\nclass D:\n    pass\n")
    violations = one_class_per_file.collect_violations(tmp_path)
    assert len(violations) == 1
    assert "two.py: 2 classes (C, D)" in violations[0]


def test_config_modules_must_be_declarative(tmp_path: Path) -> None:
    _write(tmp_path / "__init__.py", "def allowed():\n    pass\n")
    _write(tmp_path / "limits.py", "LIMIT = 3\n\n\ndef compute():\n    return LIMIT\n")
    violations = no_config_functions.collect_violations(tmp_path)
    assert len(violations) == 1
    assert "limits.py: def compute() (line 4)" in violations[0]


def test_test_file_placement_rules(tmp_path: Path) -> None:
    _write(tmp_path / "unit" / "coerce" / "test_prefixed.py", "")
    _write(tmp_path / "unit" / "coerce" / "plain.py", "")
    _write(tmp_path / "unit" / "loose.py", "")
    prefix_violations = no_test_file_prefix.collect_violations(tmp_path)
    folder_violations = unit_test_domain_folders.collect_violations(tmp_path)
    assert len(prefix_violations) == 1
    assert "test_prefixed.py" in prefix_violations[0]
    assert len(folder_violations) == 1
    assert "loose.py" in folder_violations[0]
