"""
Tests for configuration management.
"""

import json
import time

import pytest

from common_api.config import CommonApiConfig, ConfigManager, get_config_manager
from common_api.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep COMMON_API_* variables of the host out of the tests."""
    for name in ('SERVER_URL', 'API_PREFIX', 'TOKEN', 'TIMEOUT', 'CONFIG_DIR'):
        monkeypatch.delenv(f'COMMON_API_{name}', raising=False)


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(tmp_path / 'conf')


class TestCommonApiConfig:

    def test_defaults(self):
        config = CommonApiConfig()
        assert config.server_url == 'http://localhost:8080'
        assert config.api_prefix == '/api'
        assert config.timeout == 30
        assert config.verify_ssl is True
        assert not config.is_authenticated()

    @pytest.mark.parametrize('server,prefix,expected', [
        ('https://api.example.com', '/api', 'https://api.example.com/api'),
        ('https://api.example.com/', 'api/', 'https://api.example.com/api'),
        ('https://api.example.com', '', 'https://api.example.com'),
    ])
    def test_base_url(self, server, prefix, expected):
        assert CommonApiConfig(server_url=server, api_prefix=prefix).base_url == expected

    def test_token_expiry(self):
        assert not CommonApiConfig(token='t').is_token_expired()
        assert CommonApiConfig(token='t', token_expires_at=int(time.time()) - 10).is_token_expired()
        assert not CommonApiConfig(token='t', token_expires_at=int(time.time()) + 600).is_token_expired()

    def test_environment_wins(self, monkeypatch):
        monkeypatch.setenv('COMMON_API_SERVER_URL', 'https://env.example.com')
        config = CommonApiConfig(server_url='https://file.example.com')
        assert config.server_url == 'https://env.example.com'


class TestConfigManager:

    def test_load_without_file(self, manager):
        config = manager.load()
        assert config.server_url == 'http://localhost:8080'
        assert not manager.get_config_path().exists()

    def test_save_and_load(self, manager):
        manager.save(CommonApiConfig(server_url='https://api.example.com', timeout=60))

        path = manager.get_config_path()
        assert json.loads(path.read_text())['timeout'] == 60

        reloaded = ConfigManager(manager.config_dir).load()
        assert reloaded.server_url == 'https://api.example.com'
        assert reloaded.timeout == 60

    def test_update(self, manager):
        config = manager.update(token='abc', token_expires_at=123)

        assert config.token == 'abc'
        saved = json.loads(manager.get_config_path().read_text())
        assert saved['token'] == 'abc'
        assert saved['token_expires_at'] == 123

    def test_update_unknown_key(self, manager):
        with pytest.raises(ConfigurationError, match='Unknown configuration key'):
            manager.update(colour='blue')

    def test_invalid_file(self, manager):
        manager.config_dir.mkdir(parents=True)
        manager.get_config_path().write_text('not json')

        with pytest.raises(ConfigurationError):
            manager.load()

    def test_clear(self, manager):
        manager.update(server_url='https://api.example.com')
        manager.clear()

        assert not manager.get_config_path().exists()
        assert manager.get().server_url == 'http://localhost:8080'

    def test_config_dir_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv('COMMON_API_CONFIG_DIR', str(tmp_path))
        assert ConfigManager().config_dir == tmp_path

    def test_get_config_manager_with_dir(self, tmp_path):
        assert get_config_manager(tmp_path).config_dir == tmp_path
