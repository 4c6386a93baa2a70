"""Configuration settings using Pydantic."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..prompts import PLACEHOLDER


class StorageSettings(BaseSettings):
    """Question set storage configuration."""
    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_path: str = "./data"


class InterviewSettings(BaseSettings):
    """Interview behavior configuration."""
    model_config = SettingsConfigDict(env_prefix="INTERVIEW_")

    question_set_id: Optional[str] = None  # None uses the active set
    placeholder: str = PLACEHOLDER


class ConsoleSettings(BaseSettings):
    """Terminal chat configuration."""
    model_config = SettingsConfigDict(env_prefix="CONSOLE_")

    prompt: str = "> "
    show_summary_on_exit: bool = True


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    storage: StorageSettings = Field(default_factory=StorageSettings)
    interview: InterviewSettings = Field(default_factory=InterviewSettings)
    console: ConsoleSettings = Field(default_factory=ConsoleSettings)
