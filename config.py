import logging
import os

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Configuração lida das variáveis de ambiente BASIC_*."""
    log_level: str = "WARNING"
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    max_steps: int = Field(default=100000, ge=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value):
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Nível de log desconhecido: {value}")
        return value

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        values = {}
        for field in cls.model_fields:
            name = f"BASIC_{field.upper()}"
            if name in environ:
                values[field] = environ[name]
        return cls(**values)


def configure_logging(settings):
    # Log vai para stderr para não misturar com a saída do programa
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
