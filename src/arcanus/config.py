from datetime import timedelta
from pathlib import Path
import sys
from typing import Literal

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from arcanus.random_source import RandomSourceKind


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ARCANUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["dev", "prod"] = "prod"
    log_level: str | None = None
    log_file_path: Path | None = None
    random_source: RandomSourceKind = "secure"
    random_seed: int | None = None
    passwords_file_path: Path = Path("passwords.txt")

    @property
    def is_dev(self) -> bool:
        return self.environment == "dev"


config = Config()  # type: ignore

if not config.log_level:
    config.log_level = "DEBUG" if config.is_dev else "INFO"


logger.remove()
logger.add(
    sys.stderr,
    level=config.log_level,
    backtrace=True,
    diagnose=False,
)

if config.log_file_path is not None:
    config.log_file_path.parent.mkdir(exist_ok=True, parents=True)

    logger.add(
        config.log_file_path.resolve(),
        rotation="10 MB",
        retention=timedelta(days=7),
        backtrace=True,
        diagnose=False,
        level=config.log_level,
    )

logger.debug(f"Running in {config.environment} mode")
