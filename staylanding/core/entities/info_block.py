from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InfoBlock:
    id: int
    title: str
    description: str
    icon: str
    content: str
    detail_url: str | None = None
