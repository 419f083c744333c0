from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8156, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")

    # Database settings
    database_url: str = Field(
        default="sqlite+aiosqlite:///./hangar.db", description="Database connection URL"
    )

    # Listing settings
    default_page_size: int = Field(
        default=3, gt=0, description="Page size used when a list request omits pageSize"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
