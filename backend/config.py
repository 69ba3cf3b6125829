import json
from pathlib import Path
from typing import Annotated

from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator

_BACKEND_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3003
    data_dir: Path = _BACKEND_DIR / "data"
    log_level: str = "info"
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    rate_limit: str = "120/minute"
    rate_limit_enabled: bool = False

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    model_config = {
        "env_file": str(_BACKEND_DIR.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
