import pytest

from cyberark_ssh.domain.models import Config, ServerEntry


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "CYBERARK_SSH_CONFIG",
        "CYBERARK_SSH_USER",
        "CYBERARK_SSH_HOST",
        "CYBERARK_SSH_PORT",
        "CYBERARK_SSH_DEFAULT_VAULT",
        "CYBERARK_SSH_DEFAULT_ACCOUNT",
        "CYBERARK_SSH_DEFAULT_DOMAIN",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config():
    """alice / proxy.example.com with web1 mapped to vault_a"""
    return Config(
        user="alice",
        cyberark_host="proxy.example.com",
        servers={"web1": ServerEntry(vault="vault_a")},
    )


BASIC_TOML = """\
user = "alice"
cyberark_host = "proxy.example.com"

[servers]
web1 = "vault_a"
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "cyberark-ssh.toml"
    path.write_text(BASIC_TOML)
    return path
