from unittest.mock import patch

from click.testing import CliRunner

from slidepuzzle.client import cli
from slidepuzzle.client.api import ApiError


class StubApi:
    instances = []

    def __init__(self, base_url, login_error=None):
        self.base_url = base_url
        self.login_error = login_error
        StubApi.instances.append(self)

    def login_or_register(self, username):
        if self.login_error:
            raise self.login_error
        return 'tok'

    def submit_score(self, token, score, name=None):
        return {'success': True}

    def leaderboard(self):
        return []


def test_quit_returns_to_welcome():
    with patch.object(cli, 'ApiClient', StubApi):
        result = CliRunner().invoke(cli.main, ['--username', 'Alice', '--api-url', 'http://x/api'], input='q\n')
    assert result.exit_code == 0, result.output
    assert 'Level 1 - 3x3' in result.output
    assert StubApi.instances[-1].base_url == 'http://x/api'


def test_bad_input_is_reported():
    with patch.object(cli, 'ApiClient', StubApi):
        result = CliRunner().invoke(cli.main, ['--username', 'Alice'], input='99\nq\n')
    assert result.exit_code == 0, result.output
    assert 'Enter one or two positions' in result.output


def test_login_failure_exits_with_message():
    def failing(base_url):
        return StubApi(base_url, login_error=ApiError('Login/Register failed', 500))

    with patch.object(cli, 'ApiClient', failing):
        result = CliRunner().invoke(cli.main, ['--username', 'Alice'])
    assert result.exit_code == 1
    assert 'Login/Register failed' in result.output


def test_read_positions():
    assert cli._read_positions('1 5', 9) == [0, 4]
    assert cli._read_positions('1,5', 9) == [0, 4]
    assert cli._read_positions('3', 9) == [2]
    assert cli._read_positions('0 5', 9) is None
    assert cli._read_positions('a b', 9) is None
    assert cli._read_positions('1 2 3', 9) is None
    assert cli._read_positions('', 9) is None
