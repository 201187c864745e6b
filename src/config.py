"""Configuration settings for the Zion gateway."""

from typing import Optional
from pydantic_settings import BaseSettings


DEFAULT_CHAT_RESPONSE = (
    "My core network seems to be unavailable, but I've received your message "
    "through a secondary channel. I am processing your request now."
)


class Settings(BaseSettings):
    # Notion
    notion_api_key: Optional[str] = None
    notion_api_url: str = "https://api.notion.com"
    notion_version: str = "2022-06-28"
    notion_timeout: float = 30.0

    # Collections (Notion database IDs)
    notion_subscriptions_db_id: Optional[str] = None
    notion_tasks_db_id: Optional[str] = None
    notion_dash_reset_db_id: Optional[str] = None

    # Rich text property that receives the archive reason; unset means echo only
    notion_archive_reason_property: Optional[str] = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    cors_origins: list = ["*"]

    # Chat fallback
    chat_fallback_response: str = DEFAULT_CHAT_RESPONSE

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # MCP
    mcp_enabled: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
