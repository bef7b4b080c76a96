"""Tests for environment-provided settings."""

from safe_auth_cli.environment import PASSWORD_ENV_VAR
from safe_auth_cli.environment import SECRET_ENV_VAR
from safe_auth_cli.environment import AuthEnvironment


def test_from_mapping():
    env = AuthEnvironment.from_env({SECRET_ENV_VAR: "s", PASSWORD_ENV_VAR: "p", "OTHER": "x"})
    assert env == AuthEnvironment(secret="s", password="p")
    assert env.is_complete
    assert not env.is_partial


def test_from_process_environment(clean_env, monkeypatch):
    monkeypatch.setenv(SECRET_ENV_VAR, "env-secret")
    env = AuthEnvironment.from_env()
    assert env.secret == "env-secret"
    assert env.password == ""
    assert env.is_partial


def test_unset_and_empty_are_equivalent(clean_env):
    assert AuthEnvironment.from_env() == AuthEnvironment.from_env(
        {SECRET_ENV_VAR: "", PASSWORD_ENV_VAR: ""}
    )
    env = AuthEnvironment.from_env()
    assert not env.is_complete
    assert not env.is_partial


def test_repr_hides_values():
    text = repr(AuthEnvironment(secret="top-secret", password=""))
    assert "top-secret" not in text
    assert "secret=set" in text
    assert "password=unset" in text
