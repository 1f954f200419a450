from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str = "127.0.0.1"
    port: int = 8765
    debug: bool = False
    data_path: str  # Application-private data root, attachments live under <data_path>/attachments
    downloads_path: str | None = None  # Where the save picker puts exported files (unset: every save is cancelled)
    shell_token: str | None = None  # Per-launch secret shared by the desktop shell with its content view
    cors_origins: list[str] = []
    attachment_max_size: int | None = None  # Advisory upload limit in bytes, checked by the bridge
    attachment_mime_types: list[str] = ["application/pdf"]  # Advisory upload MIME allow-list (empty: allow all)
    app_version: str = "0.1.0"
    log_file: str | None = None  # Rotating log file, in addition to stderr

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SOGRINHA_",
        "extra": "ignore",
    }
