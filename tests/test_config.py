from pathlib import Path

import pytest

from uitree.config import BUNDLED_TEMPLATES_DIR, UIConfig, load_config
from uitree.errors import ConfigError


def test_defaults():
    config = UIConfig()

    assert config.template_paths == [Path("."), Path("templates")]
    assert config.homepage == "index.html"
    assert config.template_pattern == "*.html"
    assert not config.dynamic_reload
    assert not config.verbose
    assert config.search_paths()[-1] == BUNDLED_TEMPLATES_DIR


def test_load_config_reads_aliases_and_resolves_paths(tmp_path: Path):
    config_path = tmp_path / "uitree.yaml"
    config_path.write_text(
        "templatePaths: [views, /abs/views]\n"
        "homepage: home.html\n"
        "dynamicReload: true\n"
        "templatePattern: '*.jinja'\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.template_paths == [tmp_path / "views", Path("/abs/views")]
    assert config.homepage == "home.html"
    assert config.dynamic_reload
    assert config.template_pattern == "*.jinja"


def test_missing_config_file_falls_back_to_defaults(tmp_path: Path, capsys):
    config = load_config(tmp_path / "absent.yaml")

    assert config == UIConfig()
    assert "absent.yaml" in capsys.readouterr().err


@pytest.mark.parametrize(
    "content",
    ["homepage: [unclosed\n", "- just\n- a list\n", "dynamicReload: sometimes\n"],
)
def test_invalid_config_raises(tmp_path: Path, content: str):
    config_path = tmp_path / "uitree.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_with_template_paths_appends_absolute_paths(tmp_path: Path):
    config = UIConfig(template_paths=[tmp_path])

    extended = config.with_template_paths("relative/dir")

    assert extended.template_paths[0] == tmp_path
    assert extended.template_paths[1].is_absolute()
    assert extended.template_paths[1].parts[-2:] == ("relative", "dir")
    assert config.template_paths == [tmp_path]


def test_discover_templates(tmp_path: Path):
    (tmp_path / "home.html").write_text("home", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("skip", encoding="utf-8")

    names = UIConfig(template_paths=[tmp_path, tmp_path / "missing"]).discover_templates()

    assert names[0] == "home.html"
    assert {"element.html", "page.html"} <= set(names)
    assert "notes.txt" not in names


def test_describe_lists_settings():
    lines = UIConfig(template_paths=[Path("a"), Path("b")]).describe()

    assert lines[0] == "1) templatePaths: a;b"
    assert "2) homepage: index.html" in lines


def test_config_with_invalid_utf8_raises(tmp_path: Path):
    config_path = tmp_path / "uitree.yaml"
    config_path.write_bytes(b"homepage: \xff\n")

    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)

    assert "not valid UTF-8" in str(excinfo.value)
