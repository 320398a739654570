from config import Settings


def test_defaults():
    settings = Settings()

    assert settings.exit_command == "exit"
    assert settings.repl_prompt == "> "
    assert settings.max_sessions == 1_000


def test_env_prefix_overrides(monkeypatch):
    monkeypatch.setenv("SHUNT_CALC_MAX_SESSIONS", "3")
    monkeypatch.setenv("SHUNT_CALC_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.max_sessions == 3
    assert settings.log_level == "debug"
