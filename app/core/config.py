import json

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = 12

    BACKEND_CORS_ORIGINS: str = '["http://localhost:3000","http://localhost:5173"]'

    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Reachout Academy API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Create tables on startup (no migration tooling)
    AUTO_CREATE_TABLES: bool = True

    # Initial admin account used by app/scripts/setup_admin.py
    ADMIN_EMAIL: str = "admin@reachoutacademy.com"
    ADMIN_PASSWORD: str = "admin123"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS


settings = Settings()
