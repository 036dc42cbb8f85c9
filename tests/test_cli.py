"""Tests for frauth.cli."""
from frauth import cli, init
from frauth.errors import UserAborted


class TestMain:
    def test_usage(self, capsys):
        assert cli.main([]) == 2
        assert 'Usage' in capsys.readouterr().err

    def test_unknown_command(self):
        assert cli.main(['me']) == 2

    def test_success(self, monkeypatch):
        monkeypatch.setattr(init, 'run', lambda paths, prompter: None)
        assert cli.main(['init']) == 0

    def test_abort_exits_nonzero(self, monkeypatch, capsys):
        def aborted(paths, prompter):
            raise UserAborted("Halting init")
        monkeypatch.setattr(init, 'run', aborted)
        assert cli.main(['init']) == 1
        assert 'Halting init' in capsys.readouterr().err

    def test_io_error_surfaced(self, monkeypatch, capsys):
        def broken(paths, prompter):
            raise PermissionError(13, 'Permission denied', '/nope')
        monkeypatch.setattr(init, 'run', broken)
        assert cli.main(['init']) == 1
        assert 'Permission denied' in capsys.readouterr().err

    def test_uses_env_paths(self, monkeypatch, tmp_path):
        seen = {}
        monkeypatch.setenv('FRAUTH_DATA_DIR', str(tmp_path / 'd'))
        monkeypatch.setenv('FRAUTH_CACHE_DIR', str(tmp_path / 'c'))
        monkeypatch.setattr(init, 'run', lambda paths, prompter: seen.setdefault('paths', paths))
        cli.main(['init'])
        assert seen['paths'].base_data == tmp_path / 'd'
