import importlib
import sys

import pytest

# Import run.py as a module and exercise parse_args + main with a patched
# start_server so no server is started.


@pytest.fixture()
def run_module():
    if 'run' in sys.modules:
        del sys.modules['run']
    return importlib.import_module('run')


def test_version_flag_outputs_version(run_module, capsys):
    ver = run_module.__version__
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(['--version'])
    assert exc.value.code == 0
    captured = capsys.readouterr().out
    assert ver in captured
    assert 'Roomcarver Dungeon Server' in captured


def test_default_command_is_server(run_module):
    ns = run_module.parse_args([])
    assert ns.command == 'server'


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls['host'] = host
        calls['port'] = port
        calls['debug'] = debug

    monkeypatch.setenv('PORT', '5555')
    monkeypatch.setenv('HOST', '127.0.0.1')
    import roomcarver.server as server_mod
    monkeypatch.setattr(server_mod, 'start_server', fake_start_server)

    assert run_module.main(['server']) == 0
    assert calls == {'host': '127.0.0.1', 'port': 5555, 'debug': False}


def test_cli_flags_override_env(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv('PORT', '5555')
    import roomcarver.server as server_mod
    monkeypatch.setattr(server_mod, 'start_server', fake_start_server)
    run_module.main(['server', '--port', '8080', '--host', '10.0.0.1', '--debug'])
    assert calls == {'host': '10.0.0.1', 'port': 8080, 'debug': True}


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / '.env'
    env_file.write_text('PORT=6001\n')
    # register PORT with monkeypatch so the value load_dotenv sets is undone afterwards
    monkeypatch.setenv('PORT', '0')
    monkeypatch.delenv('PORT')
    calls = {}

    def fake_start_server(host, port, debug):
        calls['port'] = port

    import roomcarver.server as server_mod
    monkeypatch.setattr(server_mod, 'start_server', fake_start_server)
    run_module.main(['--env-file', str(env_file), 'server'])
    assert calls['port'] == 6001
