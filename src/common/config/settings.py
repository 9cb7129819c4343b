"""アプリケーション設定の管理."""

import os

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """HTTPサーバー設定."""

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)


class CurationConfig(BaseModel):
    """キュレーション設定."""

    seed_file: str = "config/seed_items.yaml"
    seed_enabled: bool = True
    page_size: int = Field(default=10, ge=1)


class LoggingConfig(BaseModel):
    """ロギング設定."""

    level: str = "INFO"


class AppConfig(BaseModel):
    """アプリケーション全体の設定."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    curation: CurationConfig = Field(default_factory=CurationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> AppConfig:
    """環境変数から設定を読み込む.

    Returns:
        アプリケーション設定
    """
    return AppConfig(
        server=ServerConfig(
            host=os.getenv("SERVER_HOST", "0.0.0.0"),
            port=int(os.getenv("SERVER_PORT", "8000")),
        ),
        curation=CurationConfig(
            seed_file=os.getenv("CURATION_SEED_FILE", "config/seed_items.yaml"),
            seed_enabled=_env_flag("CURATION_SEED_ENABLED", True),
            page_size=int(os.getenv("CURATION_PAGE_SIZE", "10")),
        ),
        logging=LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
        ),
    )
