from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_MESSAGE


class GreetingResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str = DEFAULT_MESSAGE
    status: Literal["OK"] = "OK"
