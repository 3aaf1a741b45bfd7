import importlib
import json
import sys

import pytest

# We import run.py as a module and exercise parse_args + main with a patched
# start_server so we do not actually start networking.


@pytest.fixture()
def run_module():
    # Ensure a clean import each time (run.py reads VERSION once)
    if "run" in sys.modules:
        del sys.modules["run"]
    return importlib.import_module("run")


def test_version_flag_outputs_version(run_module, capsys):
    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert run_module.__version__ in out
    assert "Maze Game Server" in out


def test_default_command_is_server(run_module):
    assert run_module.parse_args([]).command == "server"


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setenv("PORT", "5555")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.delenv("FLASK_DEBUG", raising=False)
    import mazegame.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", fake_start_server)
    assert run_module.main(["server"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 5555, "debug": False}


def test_server_flags_override_env(monkeypatch, run_module):
    calls = {}
    import mazegame.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", lambda host, port, debug: calls.update(port=port, debug=debug))
    monkeypatch.setenv("PORT", "5555")
    run_module.main(["server", "--port", "6001", "--debug"])
    assert calls == {"port": 6001, "debug": True}


def test_generate_ascii(run_module, capsys):
    assert run_module.main(["generate", "--seed", "7", "--width", "15", "--height", "9", "--solve"]) == 0
    out = capsys.readouterr().out.splitlines()
    maze_lines = [line for line in out if line.startswith("#")]
    assert len(maze_lines) == 9
    art = "\n".join(maze_lines)
    assert art.count("S") == 1 and art.count("E") == 1
    assert "." in art
    assert out[-1].startswith("seed=7 ")


def test_generate_json(run_module, capsys):
    assert run_module.main(["generate", "--seed", "3", "--width", "11", "--height", "11", "--json", "--solve"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("{")]
    data = json.loads(lines[-1])
    assert data["seed"] == 3
    assert data["solution"][0] == data["start"]
    assert data["solution"][-1] == data["end"]


def test_generate_rejects_tiny_grid(run_module, capsys):
    assert run_module.main(["generate", "--width", "2", "--height", "9"]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_diagnose_reports_ok(run_module, capsys):
    assert run_module.main(["diagnose", "1", "2", "--width", "21", "--height", "17"]) == 0
    out = capsys.readouterr().out
    payload = json.loads(out[out.index("{\n"):])
    assert [r["seed"] for r in payload["results"]] == [1, 2]
    assert all(r["ok"] for r in payload["results"])


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / ".env"
    env_file.write_text("HOST=10.0.0.5\nPORT=6101\n")
    for key in ("HOST", "PORT"):
        monkeypatch.setenv(key, "unused")
        monkeypatch.delenv(key)
    calls = {}
    import mazegame.server as server_mod

    monkeypatch.setattr(server_mod, "start_server", lambda host, port, debug: calls.update(host=host, port=port))
    run_module.main(["--env-file", str(env_file), "server"])
    assert calls == {"host": "10.0.0.5", "port": 6101}


def test_diagnose_rejects_tiny_grid(run_module, capsys):
    assert run_module.main(["diagnose", "1", "--width", "2", "--height", "2"]) == 1
    captured = capsys.readouterr()
    assert "[ERROR]" in captured.err
    assert "results" not in captured.out


def test_diagnose_script_matches_cli(run_module, capsys):
    import importlib.util
    from pathlib import Path

    script = Path(__file__).resolve().parent.parent / "scripts" / "diagnose_seeds.py"
    spec = importlib.util.spec_from_file_location("diagnose_seeds", script)
    diagnose_seeds = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(diagnose_seeds)

    assert diagnose_seeds.main(["4"]) == 0
    out = capsys.readouterr().out
    script_rows = json.loads(out[out.index("{\n"):])["results"]
    assert run_module.main(["diagnose", "4"]) == 0
    out = capsys.readouterr().out
    cli_rows = json.loads(out[out.index("{\n"):])["results"]
    assert script_rows == cli_rows
    assert {"dead_ends", "solution_length"} <= set(cli_rows[0])
