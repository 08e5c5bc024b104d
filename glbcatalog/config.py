from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    app_name: str = "GLB Model Manager"
    app_env: str = Field("dev", alias="APP_ENV")
    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    storage_dir: str = Field("./data/glb_models", alias="STORAGE_DIR")
    session_file: str = Field("./data/session.json", alias="SESSION_FILE")

    worker_pool_size: int = Field(4, alias="WORKER_POOL_SIZE")
    copy_buffer_size: int = Field(64 * 1024, alias="COPY_BUFFER_SIZE")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(8000, alias="PORT")

    class Config:
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

settings = Settings()
