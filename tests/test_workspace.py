import json
import logging
import sys

import pytest

from propdoc import Workspace
from propdoc.cli import main
from propdoc.core.config import config
from propdoc.core.error_handling import ExtractionError, InvalidConfigurationError, SourceSyntaxError
from propdoc.main import PropDoc

WIDGET_TS = '''
/**
 * @summary
 * Draws a widget.
 */
export interface WidgetCesiumProps {
  // Fill color.
  color?: Cesium.Color;
}

export interface WidgetCesiumEvents {
  onClick?: () => void;
}

export const cesiumEventProps = { onClick: "onClick" };
'''

LABEL_TSX = '''
export interface LabelProps {
  // Text to show.
  text: string;
}

const Label = (props: LabelProps) => <span>{props.text}</span>;

export default Label;
'''


@pytest.fixture
def src(tmp_path):
    root = tmp_path / "src"
    root.mkdir()
    (root / "Widget.ts").write_text(WIDGET_TS)
    (root / "Label.tsx").write_text(LABEL_TSX)
    (root / "index.ts").write_text('export { default as Label } from "./Label";\n')
    (root / "README.md").write_text("# components\n")
    return root


def test_component_files(src):
    ws = Workspace.open(str(src))
    assert [p.name for p in ws.component_files()] == ["Label.tsx", "Widget.ts"]
    assert [p.name for p in ws.component_files(["Widget"])] == ["Widget.ts"]


def test_open_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        Workspace.open(str(tmp_path / "missing"))


def test_parse_tsx_component(src):
    record = Workspace.open(str(src)).parse(src / "Label.tsx")
    assert record.name == "Label"
    assert [(p.name, p.required, p.description) for p in record.props] == [("text", True, "Text to show.")]


def test_generate_pages(src, tmp_path):
    out = tmp_path / "api"
    written = Workspace.open(str(src)).generate(str(out))
    assert sorted(p.name for p in written) == ["Label.mdx", "Widget.mdx"]
    page = (out / "Widget.mdx").read_text()
    assert "Draws a widget." in page
    assert "| color |" in page
    assert "Correspond to `onClick` event" in page


def test_generate_with_configured_extension(src, tmp_path):
    config.set("output", "extension", ".md")
    written = Workspace.open(str(src)).generate(str(tmp_path / "api"), ["Label"])
    assert [p.name for p in written] == ["Label.md"]


def test_invalid_output_extension():
    with pytest.raises(InvalidConfigurationError):
        config.set("output", "extension", "mdx")


def test_parse_failure_writes_nothing(src, tmp_path):
    (src / "Broken.ts").write_text("export interface BrokenProps {\n")
    out = tmp_path / "api"
    with pytest.raises(SourceSyntaxError):
        Workspace.open(str(src)).generate(str(out))
    assert not out.exists()


def test_parse_missing_file(tmp_path):
    with pytest.raises(ExtractionError):
        PropDoc().parse_file(str(tmp_path / "Missing.ts"))


def test_cli_preview_raw_json(src, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["propdoc", "preview", str(src), "Widget", "--raw-json"])
    main()
    data = json.loads(capsys.readouterr().out)
    assert [d["name"] for d in data] == ["Widget"]
    assert data[0]["summary"] == "Draws a widget."
    assert data[0]["cesiumProps"][0]["type"] == "Cesium.Color"


def test_cli_generate(src, tmp_path, monkeypatch):
    out = tmp_path / "api"
    monkeypatch.setattr(sys, "argv", ["propdoc", "generate", str(src), "--out", str(out)])
    main()
    assert (out / "Widget.mdx").exists()
    assert (out / "Label.mdx").exists()


def test_cli_fails_on_parse_error(src, tmp_path, monkeypatch):
    (src / "Broken.ts").write_text("export interface BrokenProps {\n")
    monkeypatch.setattr(sys, "argv", ["propdoc", "generate", str(src), "--out", str(tmp_path / "api")])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1


def test_cli_log_level_from_config(src, monkeypatch):
    levels = []
    monkeypatch.setattr("logging.basicConfig", lambda **kwargs: levels.append(kwargs["level"]))
    config.set("logging", "level", "DEBUG")
    monkeypatch.setattr(sys, "argv", ["propdoc", "preview", str(src), "--raw-json"])
    main()
    monkeypatch.setattr(sys, "argv", ["propdoc", "--quiet", "preview", str(src), "--raw-json"])
    main()
    assert levels == ["DEBUG", logging.ERROR]
