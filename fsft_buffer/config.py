from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BufferSettings(BaseSettings):
    """Buffer configuration"""

    # Maximum number of live entries
    capacity: int = Field(default=32, ge=0)

    # Seconds an entry may go without a refresh before it is swept
    timeout: float = Field(default=3600.0, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="FSFT_BUFFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
