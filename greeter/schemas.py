from __future__ import annotations

from pydantic import BaseModel, Field

from .utils import now_iso


class HealthOut(BaseModel):
    status: str = "healthy"
    timestamp: str = Field(default_factory=now_iso)
