from __future__ import annotations

import subprocess
import sys
from pathlib import Path

_SRC = Path(__file__).parent.parent / "src"


def _modules_loaded_by(import_stmt: str) -> set[str]:
    code = (
        "import sys\n"
        "before = set(sys.modules)\n"
        f"{import_stmt}\n"
        "print('\\n'.join(sorted(set(sys.modules) - before)))\n"
    )
    completed = subprocess.run(
        [sys.executable, "-c", code],
        cwd=_SRC,
        capture_output=True,
        text=True,
        check=True,
    )
    return set(completed.stdout.split())


def test_symbol_table_import_is_a_leaf() -> None:
    newly_imported = _modules_loaded_by("import symbols")

    assert not any(
        name.split(".")[0] in {"locate", "fsys", "settings", "pydantic", "rich"}
        for name in newly_imported
    )


def test_locator_import_does_not_load_config_or_rich() -> None:
    newly_imported = _modules_loaded_by("import locate")

    assert "symbols.table" in newly_imported
    assert "fsys.files" in newly_imported
    assert not any(
        name.split(".")[0] in {"settings", "pydantic", "rich", "logger_config"}
        for name in newly_imported
    )
