import pytest
from typer.testing import CliRunner

from cyberark_ssh.adapters.cli import session
from cyberark_ssh.adapters.cli.app import app, run, rewrite_default_invocation
from cyberark_ssh.core.exceptions import LauncherNotFoundError

runner = CliRunner()

CONN = "alice@vault_a@web1@proxy.example.com"


@pytest.fixture
def launched(monkeypatch):
    """Record launched argv instead of running anything"""
    calls = []

    def fake_launch(argv):
        calls.append(list(argv))
        return 0

    monkeypatch.setattr(session, "launch", fake_launch)
    return calls


def invoke(config_file, *args):
    return runner.invoke(app, ["--config", str(config_file), *args])


# ------------------------------------------------------------
# ssh / show
# ------------------------------------------------------------

def test_ssh_launches(config_file, launched):
    result = invoke(config_file, "ssh", "web1")
    assert result.exit_code == 0, result.output
    assert launched == [["ssh", CONN]]
    assert f"→ ssh {CONN}" in result.output


def test_ssh_forwards_extra_args(config_file, launched):
    result = invoke(config_file, "ssh", "web1", "-o", "ForwardAgent=yes", "-L", "8080:localhost:80")
    assert result.exit_code == 0, result.output
    assert launched == [["ssh", "-o", "ForwardAgent=yes", "-L", "8080:localhost:80", CONN]]


def test_ssh_passes_exit_code_through(config_file, monkeypatch):
    monkeypatch.setattr(session, "launch", lambda argv: 130)
    result = invoke(config_file, "ssh", "web1")
    assert result.exit_code == 130


def test_ssh_program_missing(config_file, monkeypatch):
    def fake_launch(argv):
        raise LauncherNotFoundError("ssh not found in PATH")

    monkeypatch.setattr(session, "launch", fake_launch)
    result = invoke(config_file, "ssh", "web1")
    assert result.exit_code == 1
    assert "ssh not found in PATH" in result.output


def test_show_does_not_launch(config_file, launched):
    result = invoke(config_file, "show", "web1")
    assert result.exit_code == 0, result.output
    assert launched == []
    assert f"→ ssh {CONN}" in result.output


def test_show_output_matches_real_run(config_file, launched):
    shown = invoke(config_file, "show", "web1", "-v")
    ran = invoke(config_file, "ssh", "web1", "-v")
    assert shown.output == ran.output


def test_unresolvable_server_does_not_launch(config_file, launched):
    result = invoke(config_file, "ssh", "web2")
    assert result.exit_code == 1
    assert launched == []
    assert "not found in config and no default_vault set" in result.output


def test_user_and_port_overrides(config_file, launched):
    result = runner.invoke(app, ["--config", str(config_file), "--user", "bob", "--port", "2222", "ssh", "web1"])
    assert result.exit_code == 0, result.output
    assert launched == [["ssh", "-p", "2222", "bob@vault_a@web1@proxy.example.com"]]


def test_missing_config_suggests_init(tmp_path, launched):
    result = invoke(tmp_path / "missing.toml", "ssh", "web1")
    assert result.exit_code == 1
    assert "cyberark-ssh init" in result.output
    assert launched == []


# ------------------------------------------------------------
# scp
# ------------------------------------------------------------

def test_scp_rewrites_remote_paths(config_file, launched):
    result = invoke(config_file, "scp", "file.txt", ":web1:/tmp/file.txt")
    assert result.exit_code == 0, result.output
    assert launched == [["scp", "file.txt", f"{CONN}:/tmp/file.txt"]]


def test_scp_malformed_token(config_file, launched):
    result = invoke(config_file, "scp", "file.txt", ":web1")
    assert result.exit_code == 1
    assert "':web1'" in result.output
    assert launched == []


def test_scp_too_few_arguments(config_file, launched):
    result = invoke(config_file, "scp", "file.txt")
    assert result.exit_code == 1
    assert "source and destination" in result.output
    assert "usage: cyberark-ssh scp" in result.output
    assert launched == []


# ------------------------------------------------------------
# list / init / help
# ------------------------------------------------------------

def test_list(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text(
        'user = "alice"\n'
        'cyberark_host = "proxy.example.com"\n'
        'default_vault = "dv"\n'
        'default_account = "root"\n'
        'ssh_args = ["-o", "BatchMode=yes"]\n'
        '[aliases]\n'
        'w = "web1"\n'
        '[servers]\n'
        'web1 = "vault_a"\n'
        'web2 = { account = "admin" }\n'
    )
    result = invoke(path, "list")
    assert result.exit_code == 0, result.output
    assert "EXPANDS TO" in result.output
    assert "vault_a" in result.output
    assert "dv (default)" in result.output
    assert "root (default)" in result.output
    assert "admin" in result.output
    assert "default vault:   dv" in result.output
    assert "default domain:  (none)" in result.output
    assert "port:            22" in result.output
    assert "ssh_args:        -o BatchMode=yes" in result.output


def test_list_without_servers(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text('user = "alice"\ncyberark_host = "proxy.example.com"\nport = 0\n')
    result = invoke(path, "list")
    assert result.exit_code == 0, result.output
    assert "no servers configured" in result.output
    assert "ALIAS" not in result.output
    assert "port:            22" in result.output


def test_init_writes_config(tmp_path):
    path = tmp_path / "new.toml"
    result = invoke(path, "init")
    assert result.exit_code == 0, result.output
    assert path.exists()

    again = invoke(path, "init")
    assert again.exit_code == 1
    assert "already exists" in again.output

    forced = invoke(path, "init", "--force")
    assert forced.exit_code == 0, forced.output


def test_help_command():
    result = runner.invoke(app, ["help"])
    assert result.exit_code == 0
    assert "Connection string format" in result.output


# ------------------------------------------------------------
# Shorthand
# ------------------------------------------------------------

@pytest.mark.parametrize("args, expected", [
    (["web1"], ["ssh", "web1", "--"]),
    (["web1", "-v", "-L", "8080:localhost:80"], ["ssh", "web1", "--", "-v", "-L", "8080:localhost:80"]),
    (["-c", "x.toml", "web1"], ["-c", "x.toml", "ssh", "web1", "--"]),
    (["--config=x.toml", "web1"], ["--config=x.toml", "ssh", "web1", "--"]),
    (["list"], ["list"]),
    (["show", "web1", "-vh"], ["show", "web1", "--", "-vh"]),
    (["ssh", "web1", "--", "ls"], ["ssh", "web1", "--", "--", "ls"]),
    (["ssh", "--help"], ["ssh", "--help"]),
    (["show"], ["show"]),
    (["scp", "a", ":web1:b"], ["scp", "a", ":web1:b"]),
    (["--help"], ["--help"]),
    (["-c", "x.toml"], ["-c", "x.toml"]),
])
def test_rewrite_default_invocation(args, expected):
    assert rewrite_default_invocation(args) == expected


def test_run_shorthand_exits_with_program_status(config_file, monkeypatch):
    calls = []

    def fake_launch(argv):
        calls.append(argv)
        return 3

    monkeypatch.setattr(session, "launch", fake_launch)
    with pytest.raises(SystemExit) as exc:
        run(["--config", str(config_file), "web1"])
    assert exc.value.code == 3
    assert calls == [["ssh", CONN]]


def test_run_without_arguments_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        run([])
    assert exc.value.code == 1
    assert "Usage:" in capsys.readouterr().err


def test_run_forwards_double_dash_to_ssh(config_file, launched):
    with pytest.raises(SystemExit) as exc:
        run(["--config", str(config_file), "web1", "--", "ls", "-la"])
    assert exc.value.code == 0
    assert launched == [["ssh", "--", "ls", "-la", CONN]]


def test_run_forwards_flag_cluster_containing_h(config_file, launched):
    with pytest.raises(SystemExit) as exc:
        run(["--config", str(config_file), "web1", "-vh"])
    assert exc.value.code == 0
    assert launched == [["ssh", "-vh", CONN]]


def test_run_show_forwards_args_verbatim(config_file, launched, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--config", str(config_file), "show", "web1", "-vh", "--", "uptime"])
    assert exc.value.code == 0
    assert launched == []
    assert f"→ ssh -vh -- uptime {CONN}" in capsys.readouterr().err


def test_run_show_without_server_exits_1(config_file, launched, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--config", str(config_file), "show"])
    assert exc.value.code == 1
    assert "Missing argument" in capsys.readouterr().err
    assert launched == []


def test_run_with_only_global_options_exits_1(config_file, launched, capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--config", str(config_file)])
    assert exc.value.code == 1
    assert "Missing command" in capsys.readouterr().err
    assert launched == []


def test_run_unknown_global_option_exits_1(config_file, launched):
    with pytest.raises(SystemExit) as exc:
        run(["--bogus", "web1"])
    assert exc.value.code == 1
    assert launched == []


def test_run_help_exits_0(capsys):
    with pytest.raises(SystemExit) as exc:
        run(["--help"])
    assert exc.value.code == 0
