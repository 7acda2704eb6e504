from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    SQLALCHEMY_DATABASE_URL: str = 'sqlite+aiosqlite:///./filemaster.db'
    JWT_SECRET_KEY: str = 'change-me'
    JWT_ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    SKIP_AUTH: bool = False
    UPLOAD_DIR: str = 'uploads'
    PROCESSED_DIR: str = 'processed'
    MAX_UPLOAD_BYTES: int = 150 * 1024 * 1024
    DEFAULT_COMPRESS_LEVEL: int = 6
    CORS_ORIGINS: list[str] = ['http://localhost:5173']
    LOG_LEVEL: str = 'INFO'


settings = Settings()
