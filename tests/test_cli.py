"""
Tests for CLI commands.
"""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from common_api.api._http import DownloadedFile
from common_api.cli import cli
from common_api.commands.entities import coerce_criteria
from common_api.config import CommonApiConfig
from common_api.exceptions import AuthenticationError, NotFoundError
from common_api.models import Department, LoginResponse, Software


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('SERVER_URL', 'API_PREFIX', 'TOKEN', 'CONFIG_DIR'):
        monkeypatch.delenv(f'COMMON_API_{name}', raising=False)


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def config():
    return CommonApiConfig(server_url='https://api.example.com', token='test-token', page_size=20)


@pytest.fixture
def mock_config(config):
    """Patch the configuration manager of the CLI."""
    with patch('common_api.cli.get_config_manager') as mock:
        config_manager = MagicMock()
        config_manager.get.return_value = config
        mock.return_value = config_manager
        yield config_manager


@pytest.fixture
def mock_client(config):
    """Patch the API client created by the commands."""
    with patch('common_api.commands.CommonAPIClient') as mock:
        instance = MagicMock()
        instance.__enter__ = MagicMock(return_value=instance)
        instance.__exit__ = MagicMock(return_value=False)
        instance.config = config
        instance.resource.return_value.criteria = ()
        mock.return_value = instance
        yield instance


class TestCLI:
    """Tests for main CLI."""

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert 'common-api' in result.output
        assert '1.0.1' in result.output

    def test_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Command line client of the common API server' in result.output
        for command in ('configure', 'login', 'list', 'export', 'system-info'):
            assert command in result.output


class TestConfigureCommand:
    """Tests for configure command."""

    def test_configure_show(self, runner, mock_config):
        result = runner.invoke(cli, ['configure', '--show'])
        assert result.exit_code == 0
        assert 'Current Configuration' in result.output
        assert 'https://api.example.com' in result.output
        assert 'test-token' not in result.output

    def test_configure_with_options(self, runner, mock_config):
        result = runner.invoke(cli, [
            'configure',
            '--server', 'https://new.example.com',
            '--prefix', '/api/v2',
            '--no-verify-ssl',
        ])
        assert result.exit_code == 0
        mock_config.update.assert_called_once_with(
            server_url='https://new.example.com', api_prefix='/api/v2', verify_ssl=False
        )
        assert 'Configuration saved' in result.output

    def test_config_clear(self, runner, mock_config):
        result = runner.invoke(cli, ['config-clear', '--yes'])
        assert result.exit_code == 0
        mock_config.clear.assert_called_once_with()


class TestAuthCommands:
    """Tests for login, logout and whoami."""

    def test_login(self, runner, mock_config, mock_client):
        mock_client.user_authenticate.login_by_username.return_value = LoginResponse.create({
            'user': {'id': 1, 'username': 'alice', 'name': 'Alice'},
            'token': {'value': 'new-token', 'max_age': 3600},
        })

        result = runner.invoke(cli, ['login', '-u', 'alice', '-p', 'secret'])

        assert result.exit_code == 0
        mock_client.user_authenticate.login_by_username.assert_called_once_with('alice', 'secret')
        kwargs = mock_config.update.call_args.kwargs
        assert kwargs['token'] == 'new-token'
        assert kwargs['token_expires_at'] > 0
        assert 'Token saved' in result.output

    def test_login_failed(self, runner, mock_config, mock_client):
        mock_client.user_authenticate.login_by_username.side_effect = AuthenticationError('bad password')

        result = runner.invoke(cli, ['login', '-u', 'alice', '-p', 'wrong'])

        assert result.exit_code == 1
        assert 'Login failed' in result.output
        mock_config.update.assert_not_called()

    def test_logout(self, runner, mock_config, mock_client):
        result = runner.invoke(cli, ['logout', '--yes'])

        assert result.exit_code == 0
        mock_client.user_authenticate.logout.assert_called_once()
        mock_config.update.assert_called_once_with(token='', token_expires_at=0)

    def test_whoami_not_authenticated(self, runner, mock_config, config):
        config.token = ''
        result = runner.invoke(cli, ['whoami'])
        assert result.exit_code == 0
        assert 'Not authenticated' in result.output


class TestListCommand:
    """Tests for list command."""

    def test_list_not_configured(self, runner):
        with patch('common_api.cli.get_config_manager') as mock:
            config_manager = MagicMock()
            config_manager.get.return_value = CommonApiConfig(server_url='')
            mock.return_value = config_manager

            result = runner.invoke(cli, ['list', 'department'])
            assert result.exit_code == 1
            assert 'not configured' in result.output.lower()

    def test_list_records(self, runner, mock_config, mock_client, department_json):
        page = Department.create_page({
            'total_count': 1, 'total_pages': 1, 'page_index': 0, 'page_size': 20,
            'content': [department_json],
        })
        api = mock_client.resource.return_value
        api.list.return_value = page

        result = runner.invoke(cli, ['list', 'department', '--page', '1', '--sort-field', 'code'])

        assert result.exit_code == 0, result.output
        kwargs = api.list.call_args.kwargs
        assert kwargs['page_request'] == {'page_index': 0, 'page_size': 20}
        assert kwargs['sort_request'] == {'sort_field': 'code', 'sort_order': None}
        assert kwargs['criteria'] is None
        assert 'SALES' in result.output
        assert 'Page 1/1 (Total: 1 records)' in result.output

    def test_list_page_must_be_positive(self, runner, mock_config, mock_client):
        result = runner.invoke(cli, ['list', 'department', '--page', '0'])
        assert result.exit_code == 1
        mock_client.resource.return_value.list.assert_not_called()

    def test_list_unknown_entity(self, runner, mock_config):
        result = runner.invoke(cli, ['list', 'spaceship'])
        assert result.exit_code == 2

    def test_list_api_error(self, runner, mock_config, mock_client):
        mock_client.resource.return_value.list.side_effect = AuthenticationError('Token expired')

        result = runner.invoke(cli, ['list', 'department'])

        assert result.exit_code == 1
        assert 'Token expired' in result.output


class TestRecordCommands:
    """Tests for get, delete and purge."""

    def test_get_by_id(self, runner, mock_config, mock_client, department_json):
        api = mock_client.resource.return_value
        api.get.return_value = Department.create(department_json)

        result = runner.invoke(cli, ['get', 'department', '1001', '-f', 'json'])

        assert result.exit_code == 0
        api.get.assert_called_once_with('1001')
        assert '"code": "SALES"' in result.output

    def test_get_dict_entry_by_code(self, runner, mock_config, mock_client):
        api = mock_client.resource.return_value
        api.get_by_code.return_value = None

        result = runner.invoke(cli, ['get', 'dict-entry', 'MALE', '--code', '--dict', 'gender'])

        assert result.exit_code == 0
        mock_client.resource.assert_called_with('dict-entry')
        api.get_by_code.assert_called_once_with('gender', 'MALE')
        assert 'Record not found' in result.output

    def test_get_not_found(self, runner, mock_config, mock_client):
        mock_client.resource.return_value.get.side_effect = NotFoundError('Resource not found')

        result = runner.invoke(cli, ['get', 'department', '9'])

        assert result.exit_code == 1

    def test_delete(self, runner, mock_config, mock_client):
        api = mock_client.resource.return_value
        api.delete.return_value = '2024-03-01T10:00:00'

        result = runner.invoke(cli, ['delete', 'department', '1001'])

        assert result.exit_code == 0
        api.delete.assert_called_once_with('1001')
        assert "Deleted department '1001' at 2024-03-01T10:00:00." in result.output

    def test_purge_cancelled(self, runner, mock_config, mock_client):
        result = runner.invoke(cli, ['purge', 'department', '1001'], input='n\n')

        assert result.exit_code == 0
        mock_client.resource.return_value.purge.assert_not_called()
        assert 'Cancelled' in result.output

    def test_purge_confirmed(self, runner, mock_config, mock_client):
        result = runner.invoke(cli, ['purge', 'department', '1001', '--yes'])

        assert result.exit_code == 0
        mock_client.resource.return_value.purge.assert_called_once_with('1001')


class TestTransferCommands:
    """Tests for export and import."""

    def test_export(self, runner, mock_config, mock_client, tmp_path):
        api = mock_client.resource.return_value
        api.export.return_value = DownloadedFile('departments.csv', 'text/csv', b'id,code\n')

        result = runner.invoke(cli, ['export', 'department', 'CSV', '-o', str(tmp_path)])

        assert result.exit_code == 0, result.output
        api.export.assert_called_once_with('csv', criteria=None, auto_download=False)
        assert (tmp_path / 'departments.csv').read_bytes() == b'id,code\n'
        assert 'Exported department records' in result.output

    def test_export_without_file(self, runner, mock_config, mock_client, tmp_path):
        mock_client.resource.return_value.export.return_value = None

        result = runner.invoke(cli, ['export', 'department', 'CSV', '-o', str(tmp_path)])

        assert result.exit_code == 0
        assert 'returned no department export file' in result.output
        assert list(tmp_path.iterdir()) == []

    def test_import(self, runner, mock_config, mock_client, tmp_path):
        path = tmp_path / 'departments.json'
        path.write_text('[]')
        api = mock_client.resource.return_value
        api.import_file.return_value = 3

        result = runner.invoke(cli, ['import', 'department', 'json', str(path), '--parallel'])

        assert result.exit_code == 0
        api.import_file.assert_called_once_with('json', str(path), parallel=True, threads=None)
        assert 'Imported 3 department records' in result.output


class TestSystemInfoCommand:
    """Tests for system-info command."""

    def test_system_info_json(self, runner, mock_config, mock_client):
        mock_client.system.get_info.return_value = Software(name='common-server', version='2.1.0')
        mock_client.system.get_time.return_value = '2024-05-01T12:00:00'

        result = runner.invoke(cli, ['system-info', '-f', 'json'])

        assert result.exit_code == 0
        mock_client.system.get_info.assert_called_once_with(show_loading=False)
        assert '"version": "2.1.0"' in result.output
        assert '"server_time": "2024-05-01T12:00:00"' in result.output


class TestCoerceCriteria:
    """Tests for converting command-line criteria by declared field types."""

    def test_types_follow_fields(self, department_api):
        criteria = coerce_criteria(department_api, (
            'internal_code=007',
            'deleted=false',
            'organization_id=5',
            "name='Sales'",
        ))
        assert criteria == {
            'internal_code': '007',
            'deleted': False,
            'organization_id': '5',
            'name': 'Sales',
        }

    def test_unknown_fields_are_typed(self, department_api):
        assert coerce_criteria(department_api, ('level=3',)) == {'level': 3}

    def test_invalid_item(self, department_api):
        with pytest.raises(ValueError):
            coerce_criteria(department_api, ('deleted',))
