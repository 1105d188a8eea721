"""Pydantic schemas for API."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel


class ExportResponse(BaseModel):
    backend: str
    code: str


class BindingResponse(BaseModel):
    state: str
    class_token: Optional[str]
    keyframes: Optional[str]
    properties: Dict[str, str]


class HealthResponse(BaseModel):
    status: str
    backends: List[str]
