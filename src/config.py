# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from the environment or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./shiftplan.db"
    log_level: str = "INFO"
    log_json: bool = False
    session_cookie_name: str = "session"
    session_expiry_days: int = 7
    billing_process_name: str = "billing-period-process"
    cors_origins: list[str] = ["http://localhost:5173"]


settings = Settings()
