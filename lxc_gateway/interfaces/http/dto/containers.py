from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class NodeStatusDTO(BaseModel):
    status: Literal["online", "offline"]
