import logging
import logging.config
import typing

from pydantic import BaseModel, field_validator

FORMATS = {
    "standard": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
    "simple": "%(levelname)s %(message)s",
}


class LoggingSettings(BaseModel):
    formatter: typing.Literal["standard", "simple"] = "standard"
    root_log_level: str = "INFO"
    child_log_levels: dict[str, str] = {}

    @field_validator("root_log_level")
    @classmethod
    def _known_root_level(cls, level: str) -> str:
        return _check_level(level)

    @field_validator("child_log_levels")
    @classmethod
    def _known_child_levels(cls, levels: dict[str, str]) -> dict[str, str]:
        return {name: _check_level(level) for name, level in levels.items()}


def _check_level(level: str) -> str:
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level}")
    return level


def apply_logging_settings(settings: LoggingSettings) -> None:
    """Configure the root logger and the per-logger levels."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                settings.formatter: {"format": FORMATS[settings.formatter]},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": settings.formatter,
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": settings.root_log_level, "handlers": ["console"]},
            "loggers": {
                name: {"level": level.upper()}
                for name, level in settings.child_log_levels.items()
            },
        }
    )
