"""Tests for inputkit.config — configuration loading, validation, ConfigManager."""

from __future__ import annotations

import json
import os

import pytest

from inputkit.config import (
    DEFAULT_CONFIG,
    ConfigManager,
    _sanitize_json_text,
    load_config,
    save_json,
    validate_config,
)
from inputkit.layout import DeviceClass


# ------------------------------------------------------------------
# DEFAULT_CONFIG
# ------------------------------------------------------------------

class TestDefaultConfig:
    """DEFAULT_CONFIG contains all expected keys with correct types."""

    EXPECTED_KEYS = {
        'device',
        'numeric_currency',
        'symbolic_currency',
        'debug',
    }

    def test_contains_all_expected_keys(self):
        assert set(DEFAULT_CONFIG.keys()) == self.EXPECTED_KEYS

    def test_defaults(self):
        assert DEFAULT_CONFIG['device'] == 'phone'
        assert DEFAULT_CONFIG['numeric_currency'] == '$'
        assert DEFAULT_CONFIG['symbolic_currency'] == '£'
        assert DEFAULT_CONFIG['debug'] is False


# ------------------------------------------------------------------
# validate_config
# ------------------------------------------------------------------

class TestValidateConfig:
    """validate_config normalises input and rejects invalid values."""

    def test_valid_data_passes(self):
        result = validate_config({
            'device': 'pad',
            'numeric_currency': '€',
            'symbolic_currency': '$',
            'debug': True,
        })
        assert result == {
            'device': 'pad',
            'numeric_currency': '€',
            'symbolic_currency': '$',
            'debug': True,
        }

    def test_none_returns_defaults(self):
        assert validate_config(None) == DEFAULT_CONFIG

    def test_tablet_normalized_to_pad(self):
        assert validate_config({'device': 'Tablet'})['device'] == 'pad'

    def test_invalid_device(self):
        with pytest.raises(ValueError, match='device'):
            validate_config({'device': 'watch'})

    @pytest.mark.parametrize('value', ['', 5, None])
    def test_invalid_currency(self, value):
        with pytest.raises(ValueError, match='numeric_currency'):
            validate_config({'numeric_currency': value})

    def test_invalid_debug(self):
        with pytest.raises(ValueError, match='debug'):
            validate_config({'debug': 'yes'})

    def test_unknown_keys_dropped(self):
        assert 'layout' not in validate_config({'layout': 'qwerty'})


# ------------------------------------------------------------------
# _sanitize_json_text
# ------------------------------------------------------------------

class TestSanitizeJsonText:

    def test_strips_comments_and_trailing_commas(self):
        raw = '''
        # hash comment
        {
            "device": "pad", // line comment
            "debug": true,
        }
        '''
        assert json.loads(_sanitize_json_text(raw)) == {'device': 'pad', 'debug': True}


# ------------------------------------------------------------------
# load_config
# ------------------------------------------------------------------

class TestLoadConfig:

    def test_missing_explicit_path_returns_defaults(self, tmp_path):
        assert load_config(str(tmp_path / 'missing.json')) == DEFAULT_CONFIG

    def test_explicit_path_merges(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'device': 'pad'}), encoding='utf-8')
        config = load_config(str(path))
        assert config['device'] == 'pad'
        assert config['numeric_currency'] == '$'

    def test_commented_file(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{\n  "symbolic_currency": "€", // euro\n}\n', encoding='utf-8')
        assert load_config(str(path))['symbolic_currency'] == '€'

    def test_invalid_values_keep_defaults(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'device': 'watch'}), encoding='utf-8')
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_broken_json_keeps_defaults(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{{{', encoding='utf-8')
        assert load_config(str(path), debug=True) == DEFAULT_CONFIG

    def test_non_object_keeps_defaults(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('[1, 2]', encoding='utf-8')
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_user_config_fallback(self, isolated_home):
        cfg_dir = isolated_home / '.config' / 'inputkit'
        cfg_dir.mkdir(parents=True)
        (cfg_dir / 'config.json').write_text(json.dumps({'numeric_currency': 'kr'}), encoding='utf-8')
        assert load_config()['numeric_currency'] == 'kr'

    def test_no_user_config(self, isolated_home):
        assert load_config() == DEFAULT_CONFIG


# ------------------------------------------------------------------
# ConfigManager
# ------------------------------------------------------------------

class TestConfigManager:

    def test_defaults_without_file(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / 'config.json'))
        assert mgr.get_all() == DEFAULT_CONFIG
        assert mgr.device is DeviceClass.PHONE

    def test_set_and_save_and_reload(self, tmp_path):
        path = str(tmp_path / 'config.json')
        mgr = ConfigManager(path)
        mgr.set('device', 'pad')
        assert mgr.save() is True

        other = ConfigManager(path)
        assert other.get('device') == 'pad'
        assert other.device is DeviceClass.PAD

    def test_update_and_reset(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / 'config.json'))
        mgr.update({'numeric_currency': '€', 'debug': True})
        assert mgr.get('numeric_currency') == '€'
        mgr.reset_to_defaults()
        assert mgr.get_all() == DEFAULT_CONFIG

    def test_reload_discards_unsaved_changes(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / 'config.json'))
        mgr.set('debug', True)
        mgr.reload()
        assert mgr.get('debug') is False

    def test_validate(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / 'config.json'))
        assert mgr.validate() is True
        mgr.set('device', 'watch')
        assert mgr.validate() is False

    def test_get_all_hides_internal_keys(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / 'config.json'))
        mgr.set('_internal', 1)
        assert '_internal' not in mgr.get_all()

    def test_save_to_other_path(self, tmp_path):
        mgr = ConfigManager(str(tmp_path / 'config.json'))
        target = tmp_path / 'other.json'
        assert mgr.save(str(target)) is True
        assert json.loads(target.read_text(encoding='utf-8')) == DEFAULT_CONFIG

    def test_default_path(self, isolated_home):
        mgr = ConfigManager()
        assert mgr.config_path == str(isolated_home / '.config' / 'inputkit' / 'config.json')


# ------------------------------------------------------------------
# save_json
# ------------------------------------------------------------------

class TestSaveJson:

    def test_writes_utf8_without_escapes(self, tmp_path):
        path = tmp_path / 'config.json'
        save_json(str(path), {'symbolic_currency': '£'})
        assert '£' in path.read_text(encoding='utf-8')
        assert json.loads(path.read_text(encoding='utf-8')) == {'symbolic_currency': '£'}

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / 'a' / 'b' / 'config.json'
        save_json(str(path), {})
        assert path.exists()

    def test_leaves_no_temp_files(self, tmp_path):
        save_json(str(tmp_path / 'config.json'), {'debug': True})
        assert os.listdir(tmp_path) == ['config.json']
