"""Tests for figma_codegen.cli."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from figma_codegen.cli import (
    build_generation_config,
    load_config_file,
    main,
    parse_args,
    run,
)
from figma_codegen.integrations.figma_client import FigmaClientError

from tests.factories import bbox, make_frame, make_text, solid


@pytest.fixture
def design():
    return make_frame("1:1", "Login", [
        make_text("1:2", "Email Input", "Email"),
        make_frame("1:3", "Submit Button", [make_text("1:4", "Label", "Sign in")]),
    ], absoluteBoundingBox=bbox(0, 0, 320, 200), fills=[solid(1, 1, 1)])


@pytest.fixture
def design_file(tmp_path, design):
    path = tmp_path / "design.json"
    # Full /v1/files response shape
    path.write_text(json.dumps({"name": "Checkout", "document": design}), encoding="utf-8")
    return path


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ─── Arguments and config ───────────────────────────────────────────


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.file_key is None
        assert args.format is None
        assert args.no_typescript is False
        assert args.no_componentize is False
        assert args.verbose is False

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            parse_args(["--format", "svelte"])


class TestBuildGenerationConfig:

    def test_defaults(self):
        config = build_generation_config(parse_args([]), {})
        assert config.output_dialect == "react"
        assert config.typed is True
        assert config.componentize is True
        assert config.css_framework == "none"
        assert config.component_name is None

    def test_file_output_section(self):
        file_config = {"output": {
            "format": "vue",
            "useTypeScript": False,
            "componentize": False,
            "cssFramework": "tailwind",
            "componentName": "LoginPage",
        }}
        config = build_generation_config(parse_args([]), file_config)
        assert config.output_dialect == "vue"
        assert config.typed is False
        assert config.componentize is False
        assert config.css_framework == "tailwind"
        assert config.component_name == "LoginPage"

    def test_flags_override_file(self):
        args = parse_args(["--format", "html", "--no-typescript", "--component-name", "Home"])
        config = build_generation_config(args, {"output": {"format": "vue", "componentName": "Page"}})
        assert config.output_dialect == "html"
        assert config.typed is False
        assert config.component_name == "Home"


class TestLoadConfigFile:

    def test_no_path(self):
        assert load_config_file(None) == {}

    def test_reads_object(self, tmp_path):
        path = _write_json(tmp_path / "config.json", {"output": {"format": "vue"}})
        assert load_config_file(str(path)) == {"output": {"format": "vue"}}

    def test_rejects_non_object(self, tmp_path):
        path = _write_json(tmp_path / "config.json", ["react"])
        with pytest.raises(ValueError, match="JSON object"):
            load_config_file(str(path))


# ─── Runs ───────────────────────────────────────────────────────────


class TestRun:

    def test_generates_from_input_file(self, tmp_path, design_file):
        out = tmp_path / "out"
        assert run(parse_args(["--input", str(design_file), "--output-dir", str(out)])) == 0
        assert (out / "components/Login/Login.tsx").exists()
        assert (out / "components/Login/Login.types.ts").exists()

    def test_output_dir_from_config_file(self, tmp_path, design_file):
        out = tmp_path / "configured"
        config_path = _write_json(tmp_path / "config.json", {
            "output": {"outputDir": str(out), "format": "html"},
        })
        assert run(parse_args(["--input", str(design_file), "--config", str(config_path)])) == 0
        assert sorted(p.name for p in out.iterdir()) == ["index.html", "styles.css"]

    def test_fetches_from_figma(self, tmp_path, design):
        out = tmp_path / "out"
        with patch("figma_codegen.cli.fetch_design", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = design
            code = run(parse_args(["abc123", "--node-id", "1:1", "--output-dir", str(out)]))

        assert code == 0
        mock_fetch.assert_awaited_once_with("abc123", "1:1", None)
        assert (out / "components/Login/Login.css").exists()

    def test_file_key_and_token_from_config(self, tmp_path, design):
        config_path = _write_json(tmp_path / "config.json", {
            "figma": {"accessToken": "pat-123", "fileKey": "abc123", "nodeId": "1:1"},
            "output": {"outputDir": str(tmp_path / "out")},
        })
        with patch("figma_codegen.cli.fetch_design", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = design
            assert run(parse_args(["--config", str(config_path)])) == 0

        mock_fetch.assert_awaited_once_with("abc123", "1:1", "pat-123")

    def test_placeholder_values_ignored(self, tmp_path):
        config_path = _write_json(tmp_path / "config.json", {
            "figma": {"accessToken": "YOUR_FIGMA_ACCESS_TOKEN", "fileKey": "YOUR_FIGMA_FILE_KEY"},
        })
        with patch("figma_codegen.cli.fetch_design", new_callable=AsyncMock) as mock_fetch:
            assert run(parse_args(["--config", str(config_path)])) == 1
        mock_fetch.assert_not_called()

    def test_missing_file_key_fails(self, tmp_path):
        assert run(parse_args(["--output-dir", str(tmp_path)])) == 1

    def test_figma_error_fails(self, tmp_path):
        with patch("figma_codegen.cli.fetch_design", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.side_effect = FigmaClientError("Figma API returned 403 Forbidden")
            assert run(parse_args(["abc123", "--output-dir", str(tmp_path / "out")])) == 1
        assert not (tmp_path / "out").exists()

    def test_invalid_json_fails(self, tmp_path):
        path = tmp_path / "design.json"
        path.write_text("{not json", encoding="utf-8")
        assert run(parse_args(["--input", str(path), "--output-dir", str(tmp_path)])) == 1

    def test_missing_input_file_fails(self, tmp_path):
        missing = tmp_path / "missing.json"
        assert run(parse_args(["--input", str(missing), "--output-dir", str(tmp_path)])) == 1

    def test_empty_design_fails(self, tmp_path):
        path = _write_json(tmp_path / "design.json", {})
        assert run(parse_args(["--input", str(path), "--output-dir", str(tmp_path / "out")])) == 1


class TestMain:

    def test_main_returns_exit_code(self, tmp_path, design_file, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        out = tmp_path / "out"
        assert main(["--input", str(design_file), "--output-dir", str(out), "--format", "vue"]) == 0
        assert (out / "components/Login/Login.vue").exists()
