"""Tests for utils/config_loader.py."""
import pytest
import yaml
from debug_tools.utils.config_loader import (
    load_yaml_config, load_app_config, parse_overrides, parse_nudges, get_display_settings,
)


def test_load_shipped_line_intersection_config(config_dir):
    config = load_app_config('line_intersection', str(config_dir))
    assert config['app']['parameters']['l1_start'] == [150, 170]
    assert config['output']['plot_filename'] == 'line_intersection.png'
    assert config['visualization']['scale'] == 3


@pytest.mark.parametrize("app_name", ['line', 'polyline', 'line_intersection'])
def test_every_app_has_a_config(config_dir, app_name):
    config = load_app_config(app_name, str(config_dir))
    assert config['app']['parameters']


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_app_config('line', str(tmp_path))


def test_empty_file_gives_empty_sections(tmp_path):
    (tmp_path / 'line.yaml').write_text("")
    assert load_yaml_config(str(tmp_path / 'line.yaml')) == {}
    assert load_app_config('line', str(tmp_path)) == {'app': {}, 'visualization': {}, 'output': {}}


def test_malformed_yaml_raises(tmp_path):
    (tmp_path / 'line.yaml').write_text("app: [unclosed\n")
    with pytest.raises(yaml.YAMLError, match="line.yaml"):
        load_app_config('line', str(tmp_path))


def test_section_must_be_mapping(tmp_path):
    (tmp_path / 'line.yaml').write_text("app:\n  - start\n")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_app_config('line', str(tmp_path))


def test_parameters_must_be_mapping(tmp_path):
    (tmp_path / 'line.yaml').write_text("app:\n  parameters: [1, 2]\n")
    with pytest.raises(ValueError, match="'app.parameters' .* must be a mapping"):
        load_app_config('line', str(tmp_path))


@pytest.mark.parametrize("scale", ['big', '0', '-2', '1.5', 'true'])
def test_scale_must_be_positive_integer(tmp_path, scale):
    (tmp_path / 'line.yaml').write_text(f"visualization:\n  scale: {scale}\n")
    with pytest.raises(ValueError, match="must be a positive integer"):
        load_app_config('line', str(tmp_path))


def test_parse_overrides():
    assert parse_overrides(['stroke=3', 'start = (1, 2)']) == {'stroke': '3', 'start': '(1, 2)'}


@pytest.mark.parametrize("bad", ['stroke', '=3'])
def test_parse_overrides_rejects_malformed(bad):
    with pytest.raises(ValueError, match="NAME=VALUE"):
        parse_overrides([bad])


def test_display_settings_defaults():
    assert get_display_settings({}) == (3, True)
    assert get_display_settings({'visualization': {'scale': 2, 'show_parameters': False}}) == (2, False)


def test_display_settings_from_loaded_config(tmp_path):
    (tmp_path / 'line.yaml').write_text("visualization:\n  scale: 2\n")
    assert get_display_settings(load_app_config('line', str(tmp_path))) == (2, True)


# --- nudges ---

def test_parse_nudges():
    assert parse_nudges(['stroke=2', 'start = -1, 3']) == [('stroke', 2, 0), ('start', -1, 3)]


def test_parse_nudges_keeps_order_and_repeats():
    assert parse_nudges(['p1=1', 'p1=1']) == [('p1', 1, 0), ('p1', 1, 0)]


@pytest.mark.parametrize("bad", ['stroke', '=3', 'start=1,2,3'])
def test_parse_nudges_rejects_malformed(bad):
    with pytest.raises(ValueError, match=r"NAME=DX\[,DY\]"):
        parse_nudges([bad])


@pytest.mark.parametrize("bad", ['stroke=up', 'start=1,x', 'stroke='])
def test_parse_nudges_rejects_non_integer_steps(bad):
    with pytest.raises(ValueError, match="steps must be integers"):
        parse_nudges([bad])
