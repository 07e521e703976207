"""Boundary tests for type_extraction internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_extraction_core_does_not_import_io_or_cli_layers() -> None:
    extraction_dir = _project_root() / "src" / "typextract" / "type_extraction"
    forbidden_import_fragments = (
        "typextract.cli",
        "typextract.configuration",
        "typextract.results_writing",
        "typextract.schema_management.schema_projection",
        "import json",
        "import yaml",
    )

    for module_path in sorted(extraction_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
