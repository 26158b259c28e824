from __future__ import annotations

"""
Unit tests for the scan pipeline orchestrator.

Verifies the fatal conditions (unreachable and empty targets), progress
lifecycle, dry runs, artifact naming and write-failure handling.
"""

import json
import os
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from foldermap.core.pipeline.engine import run_pipeline
from foldermap.domain.pipeline_models import ScanErrorKind

FIXED_NOW = datetime(2024, 5, 17, 13, 45, 9, tzinfo=timezone.utc)


def test_unreachable_target_aborts_before_progress(tmp_path, mock_config_dict, progress):
    mock_config_dict["target_path"] = str(tmp_path / "does_not_exist")

    result = run_pipeline(mock_config_dict, progress=progress)

    assert result.ok is False
    assert result.error_kind == ScanErrorKind.TARGET_UNREACHABLE
    assert "Cannot access directory" in result.error
    assert progress.calls == []
    assert not os.path.exists(mock_config_dict["output_dir"])


def test_empty_target_fails_without_artifact(make_tree, mock_config_dict, progress):
    make_tree({"empty_sub": {}})

    result = run_pipeline(mock_config_dict, progress=progress)

    assert result.ok is False
    assert result.error_kind == ScanErrorKind.EMPTY_TARGET
    assert result.error == "No files found in directory"
    assert progress.calls == []
    assert not os.path.exists(mock_config_dict["output_dir"])


def test_file_target_counts_as_empty(make_tree, mock_config_dict, progress):
    root = make_tree({"a.txt": "x"})
    mock_config_dict["target_path"] = str(root / "a.txt")

    result = run_pipeline(mock_config_dict, progress=progress)

    assert result.error_kind == ScanErrorKind.EMPTY_TARGET


def test_successful_scan_writes_named_artifact(make_tree, mock_config_dict, progress):
    make_tree({
        "README.md": "",
        "docs": {"guide.md": ""},
        "src": {"main.py": "", "utils": {"helper.py": ""}},
    })

    result = run_pipeline(mock_config_dict, progress=progress, now=FIXED_NOW)

    assert result.ok is True
    assert result.error_kind is None
    expected_path = os.path.join(mock_config_dict["output_dir"], "project_20240517_134509.json")
    assert result.output_path == expected_path

    with open(expected_path, encoding="utf-8") as f:
        data = json.load(f)

    assert data == {
        "docs": ["guide.md"],
        "src": {"utils": ["helper.py"], "": ["main.py"]},
        "root": ["README.md"],
    }
    assert data == result.structure
    assert result.summary["generated_file"] == "project_20240517_134509.json"
    assert result.summary["folders"] == 2
    assert result.summary["root_files"] == 1


def test_progress_lifecycle_and_counts(make_tree, mock_config_dict, progress):
    make_tree({"a.txt": "", "web": {"index.html": "", "dist": {"bundle.js": ""}}})

    result = run_pipeline(mock_config_dict, progress=progress, now=FIXED_NOW)

    assert progress.calls == ["start", "stop"]
    # bundle.js is counted but hidden by the shallow subfolder check
    assert progress.total == 3 == result.total_files
    assert progress.completed == 2 == result.scanned_files


def test_progress_stopped_when_scan_raises(make_tree, mock_config_dict, progress):
    make_tree({"a.txt": ""})

    with patch("foldermap.core.pipeline.engine.scan_target", side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError):
            run_pipeline(mock_config_dict, progress=progress)

    assert progress.calls == ["start", "stop"]


def test_dry_run_does_not_write(make_tree, mock_config_dict, progress):
    make_tree({"a.txt": ""})
    mock_config_dict["dry_run"] = True

    result = run_pipeline(mock_config_dict, progress=progress)

    assert result.ok is True
    assert result.output_path == ""
    assert result.structure == {"root": ["a.txt"]}
    assert result.summary["dry_run"] is True
    assert not os.path.exists(mock_config_dict["output_dir"])


def test_write_failure_is_unexpected(make_tree, mock_config_dict, progress):
    make_tree({"a.txt": ""})

    with patch("foldermap.core.pipeline.engine.write_structure", side_effect=OSError("disk full")):
        result = run_pipeline(mock_config_dict, progress=progress)

    assert result.ok is False
    assert result.error_kind == ScanErrorKind.UNEXPECTED_FAILURE
    assert "disk full" in result.error


def test_custom_indent_is_respected(make_tree, mock_config_dict):
    make_tree({"a.txt": ""})
    mock_config_dict["json_indent"] = 4

    result = run_pipeline(mock_config_dict, now=FIXED_NOW)

    with open(result.output_path, encoding="utf-8") as f:
        content = f.read()
    assert content == json.dumps({"root": ["a.txt"]}, indent=4)


def test_default_target_is_cwd(make_tree, mock_config_dict, monkeypatch):
    root = make_tree({"a.txt": ""})
    monkeypatch.chdir(root)
    mock_config_dict["target_path"] = ""
    mock_config_dict["dry_run"] = True

    result = run_pipeline(mock_config_dict)

    assert result.target_path == str(root)
    assert result.scanned_files == 1
