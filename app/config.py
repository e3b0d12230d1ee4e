from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    # === APP ===
    ENVIRONMENT: str = Field(default="development", description="development, production or test")
    PORT: int = Field(default=3000, description="HTTP port")

    # === DATABASE ===
    DATABASE_URL: str = Field(default="sqlite:///./salon.db", description="SQLAlchemy database URL")
    DATABASE_POOL_SIZE: int = Field(default=10, description="Connection pool size")

    # === JWT AUTH ===
    JWT_ACCESS_SECRET: str = Field(min_length=32, description="Secret for signing access tokens")
    JWT_REFRESH_SECRET: str = Field(min_length=32, description="Secret for signing refresh tokens")
    ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=15, description="Access token lifetime in minutes")
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=7, description="Refresh token lifetime in days")

    # === CORS ===
    FRONTEND_CLIENT_URL: str = Field(default="http://localhost:3001", description="Public site origin")
    FRONTEND_ADMIN_URL: str = Field(default="http://localhost:3002", description="Admin panel origin")

    # === FIREBASE STORAGE ===
    FIREBASE_PROJECT_ID: str = Field(default="test-project")
    FIREBASE_PRIVATE_KEY: str = Field(default="<from-service-account-json>")
    FIREBASE_CLIENT_EMAIL: str = Field(default="test@test.iam.gserviceaccount.com")
    FIREBASE_STORAGE_BUCKET: str = Field(default="test-bucket.appspot.com")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @model_validator(mode="after")
    def check_distinct_secrets(self):
        if self.JWT_ACCESS_SECRET == self.JWT_REFRESH_SECRET:
            raise ValueError("JWT_ACCESS_SECRET and JWT_REFRESH_SECRET must differ")
        return self

    @property
    def cors_origins(self) -> List[str]:
        return [self.FRONTEND_CLIENT_URL, self.FRONTEND_ADMIN_URL]

    @property
    def storage_configured(self) -> bool:
        return bool(self.FIREBASE_PRIVATE_KEY) and "from-service-account-json" not in self.FIREBASE_PRIVATE_KEY


# Create settings instance
settings = Settings()
