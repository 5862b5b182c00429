from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_PORT = 8080
DEFAULT_MESSAGE = "Hello from EKS!"
DEFAULT_HOST = "0.0.0.0"


class Settings(BaseModel):
    """Process configuration, resolved once at startup."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    message: str = DEFAULT_MESSAGE
    host: str = DEFAULT_HOST

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        # Empty values fall back to the defaults, same as unset ones.
        return cls(
            port=env.get("PORT") or DEFAULT_PORT,
            message=env.get("MESSAGE") or DEFAULT_MESSAGE,
            host=env.get("HOST") or DEFAULT_HOST,
        )
