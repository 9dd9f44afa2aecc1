from pydantic import BaseModel, field_validator

from greeter.config.base_settings import BaseServiceSettings
from greeter.config.logger import LoggingSettings


class ServerSettings(BaseModel):
    host: str
    port: int


class AppSettings(BaseModel):
    app_name: str
    api_prefix: str
    server: ServerSettings

    @field_validator("api_prefix")
    @classmethod
    def _valid_prefix(cls, prefix: str) -> str:
        if not prefix.startswith("/") or prefix.endswith("/"):
            raise ValueError(
                f"api_prefix must start with '/' and not end with '/': {prefix!r}"
            )
        return prefix


class ServiceSettings(BaseServiceSettings):
    logging: LoggingSettings
    main: AppSettings
