import logging

import pytest

from maze_gen.config import Config, clamp_unit, parse_hex_color, solved_output_path
from maze_gen.errors import ConfigError


def write_toml(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text)
    return path


def test_defaults():
    config = Config()
    assert (config.width, config.height) == (50, 50)
    assert config.algorithm == "recursive_backtracking"
    assert config.complexity == 0.5
    assert config.output == "maze.png"
    assert config.cell_size == 10
    assert config.seed is None
    assert config.line_rgb == (255, 0, 0)
    assert config.solved_output == "maze_solved.png"


def test_from_file_reads_every_key(tmp_path):
    path = write_toml(
        tmp_path,
        'width = 20\nheight = 15\nalgorithm = "Hunt-And-Kill"\ncomplexity = 0.25\n'
        'output = "out/m.png"\ncell_size = 6\nseed = 99\nline_color = "#00ff00"\nline_thickness = 0.5\n',
    )
    config = Config.from_file(path)
    assert (config.width, config.height) == (20, 15)
    assert config.algorithm == "hunt_and_kill"
    assert config.complexity == 0.25
    assert config.output == "out/m.png"
    assert config.cell_size == 6
    assert config.seed == 99
    assert config.line_rgb == (0, 255, 0)
    assert config.line_thickness == 0.5


def test_unknown_keys_are_ignored(tmp_path):
    path = write_toml(tmp_path, 'width = 8\nfavourite_colour = "blue"\n')
    assert Config.from_file(path).width == 8


def test_complexity_and_thickness_are_clamped():
    config = Config(complexity=4.0, line_thickness=-1.0)
    assert config.complexity == 1.0
    assert config.line_thickness == 0.0
    assert Config(complexity=-0.5).complexity == 0.0


@pytest.mark.parametrize(
    "values",
    [
        {"width": 0},
        {"height": -2},
        {"cell_size": 0},
        {"algorithm": "labyrinth"},
        {"line_color": "red"},
    ],
)
def test_invalid_values_raise(values):
    with pytest.raises(ConfigError):
        Config(**values)


def test_bad_toml_raises_from_file(tmp_path):
    path = write_toml(tmp_path, "width = = 3\n")
    with pytest.raises(ConfigError):
        Config.from_file(path)


def test_wrong_type_raises_from_file(tmp_path):
    path = write_toml(tmp_path, 'width = "wide"\n')
    with pytest.raises(ConfigError):
        Config.from_file(path)


def test_load_missing_file_gives_defaults(tmp_path):
    assert Config.load(tmp_path / "missing.toml") == Config()


def test_load_broken_file_warns_and_gives_defaults(tmp_path, caplog):
    path = write_toml(tmp_path, 'algorithm = "labyrinth"\n')
    with caplog.at_level(logging.WARNING, logger="maze_gen.config"):
        config = Config.load(path)
    assert config == Config()
    assert "Using defaults" in caplog.text


def test_with_overrides_skips_none():
    base = Config(width=30, seed=5)
    updated = base.with_overrides(width=12, height=None, seed=None, algorithm="kruskal")
    assert updated.width == 12
    assert updated.height == 50
    assert updated.seed == 5
    assert updated.algorithm == "kruskal"
    assert base.width == 30


def test_with_overrides_validates():
    with pytest.raises(ConfigError):
        Config().with_overrides(complexity=0.2, algorithm="nope")


@pytest.mark.parametrize(
    "text,rgb",
    [
        ("#FF0000", (255, 0, 0)),
        ("00ff7f", (0, 255, 127)),
        ("#0f0", (0, 255, 0)),
        ("  #102030 ", (16, 32, 48)),
    ],
)
def test_parse_hex_color(text, rgb):
    assert parse_hex_color(text) == rgb


@pytest.mark.parametrize("text", ["", "#12345", "#GGGGGG", "#1234567"])
def test_parse_hex_color_rejects(text):
    with pytest.raises(ConfigError):
        parse_hex_color(text)


def test_solved_output_path():
    assert solved_output_path("maze.png") == "maze_solved.png"
    assert solved_output_path("out/big.png") == "out/big_solved.png"
    assert solved_output_path("maze") == "maze_solved.png"


def test_clamp_unit():
    assert clamp_unit(2) == 1.0
    assert clamp_unit(-1) == 0.0
    assert clamp_unit(0.3) == 0.3


@pytest.mark.parametrize(
    "text",
    [
        'complexity = "high"\n',
        "line_color = 5\n",
        "line_thickness = [1, 2]\n",
        "width = 12.5\n",
        "cell_size = true\n",
        "algorithm = 3\n",
        'seed = "abc"\n',
    ],
)
def test_wrongly_typed_values_raise_config_error(tmp_path, text):
    path = write_toml(tmp_path, text)
    with pytest.raises(ConfigError):
        Config.from_file(path)


def test_load_falls_back_on_wrongly_typed_value(tmp_path, caplog):
    path = write_toml(tmp_path, 'complexity = "high"\nline_color = 5\n')
    with caplog.at_level(logging.WARNING, logger="maze_gen.config"):
        assert Config.load(path) == Config()
    assert "Using defaults" in caplog.text


def test_parse_hex_color_rejects_non_string():
    with pytest.raises(ConfigError):
        parse_hex_color(0xFF0000)
