import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.utils import DEFAULT_SETTINGS, load_config, load_settings

CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', 'config', 'config.yaml')


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for var in ('LONG_STRING_CHAR_WIDTH', 'LONG_STRING_ENCODING',
                'LONG_STRING_LOG_LEVEL', 'LONG_STRING_LOG_FILE'):
        monkeypatch.delenv(var, raising=False)


def test_load_config():
    config = load_config(CONFIG_PATH)
    assert isinstance(config, dict)
    assert config.get('sizing', {}).get('char_width') == 2
    assert config['sizing']['encoding'] is None


def test_load_config_empty_file(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('')
    assert load_config(str(path)) == {}


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / 'absent.yaml'))


def test_load_settings_missing_file_uses_defaults(tmp_path):
    settings = load_settings(str(tmp_path / 'absent.yaml'))
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_load_settings_merges_sections(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('sizing:\n  encoding: utf-8\n')
    settings = load_settings(str(path))
    assert settings['sizing'] == {'char_width': 2, 'encoding': 'utf-8'}
    assert settings['logging'] == DEFAULT_SETTINGS['logging']


def test_load_settings_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv('LONG_STRING_CHAR_WIDTH', '4')
    monkeypatch.setenv('LONG_STRING_LOG_LEVEL', 'info')
    settings = load_settings(str(tmp_path / 'absent.yaml'))
    assert settings['sizing']['char_width'] == 4
    assert settings['logging']['level'] == 'info'
    assert DEFAULT_SETTINGS['sizing']['char_width'] == 2


@pytest.mark.parametrize('text, section', [
    ('- sizing\n', None),
    ('sizing: [1, 2]\n', 'sizing'),
    ('logging: verbose\n', 'logging'),
])
def test_load_settings_rejects_non_mapping(tmp_path, text, section):
    path = tmp_path / 'config.yaml'
    path.write_text(text)
    with pytest.raises(ValueError) as excinfo:
        load_settings(str(path))
    if section:
        assert f"'{section}'" in str(excinfo.value)


def test_load_settings_empty_section_keeps_defaults(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('sizing:\n')
    assert load_settings(str(path))['sizing'] == DEFAULT_SETTINGS['sizing']
