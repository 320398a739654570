"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks SHUNT_CALC_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # REPL
    repl_prompt: str = "> "
    exit_command: str = "exit"

    # API — jedna instancja Calculator na sesję
    max_sessions: int = 1_000

    # App
    app_title: str = "ShuntCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="SHUNT_CALC_", env_file=".env", extra="ignore")
