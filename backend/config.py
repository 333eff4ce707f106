from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./steel_tubes.db"
    COMPANY_NAME: str = "Shiv Shakti Steel Tubes"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 10000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # comma separated

    # Reports
    PENDING_STATUS: str = "Pending"

    class Config:
        env_file = ".env"

    @property
    def cors_origins(self) -> list:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
