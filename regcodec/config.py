from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class CodecSettings(BaseSettings):
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")
    log_json: bool = Field(False, validation_alias="LOG_JSON")
    logger_name: str = Field("regcodec", validation_alias="LOGGER_NAME")

    # Encode every holding/coil parameter of a command instead of the first.
    encode_all_params: bool = Field(False, validation_alias="ENCODE_ALL_PARAMS")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> CodecSettings:
    return CodecSettings()
