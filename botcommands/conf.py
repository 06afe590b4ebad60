import logging.config
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BotCommandsSettings(BaseSettings):
    model_config = SettingsConfigDict(secrets_dir="/run/secrets", env_prefix="BOTCOMMANDS_")

    BOT_NAME: str = Field(default="bot", description="Handle the bot is mentioned with, without the leading '@'")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Level of the botcommands loggers"
    )


settings = BotCommandsSettings()  # type: ignore


def configure_logging(level: str | None = None) -> None:
    """
    Configure the ``botcommands`` loggers to write to the console.

    Args:
        level: The level to use, defaults to ``settings.LOG_LEVEL``.
    """
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"verbose": {"format": "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"}},
        "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "verbose"}},
        "loggers": {"botcommands": {"level": level or settings.LOG_LEVEL, "handlers": ["console"], "propagate": False}},
    })
