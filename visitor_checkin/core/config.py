"""
Application configuration settings
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "Visitor Check-in"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS - the single trusted client origin
    CORS_ORIGIN: str = "http://localhost:3000"

    # Request bodies carry base64 images
    MAX_BODY_SIZE: int = 10485760  # 10MB

    # MongoDB
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "visitor_checkin"
    MONGODB_COLLECTION: str = "visitors"

    # Capture form client
    API_URL: str = "http://localhost:5000/api/visitors"


# Create settings instance
settings = Settings()
