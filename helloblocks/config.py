"""Application configuration"""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or text

    # Chain driver
    CHAIN_LENGTH: int = Field(5, ge=0)  # Number of blocks the driver produces
    DUMP_BYTES: bool = False  # Print canonical block bytes before hashing

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
