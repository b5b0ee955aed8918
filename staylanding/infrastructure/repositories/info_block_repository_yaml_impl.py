from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from staylanding.core.entities.info_block import InfoBlock
from staylanding.core.repositories.info_block_repository import InfoBlockRepository


class YamlInfoBlockRepositoryImpl(InfoBlockRepository):
    """
    Info blocks read once from a YAML file holding a top-level `info_blocks` list.
    """

    def __init__(self, *, file_path: str | Path) -> None:
        self._path = Path(file_path)
        self._blocks: list[InfoBlock] | None = None

    def list_all(self) -> list[InfoBlock]:
        if self._blocks is None:
            self._blocks = self._load()
        return list(self._blocks)

    def _load(self) -> list[InfoBlock]:
        with self._path.open("r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}

        records: list[dict[str, Any]] = doc.get("info_blocks") or []
        blocks = [self._record_to_block(record) for record in records]

        ids = [block.id for block in blocks]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate info block id in {self._path}")
        return blocks

    @staticmethod
    def _record_to_block(record: dict[str, Any]) -> InfoBlock:
        return InfoBlock(
            id=int(record["id"]),
            title=record["title"],
            description=record["description"],
            icon=record["icon"],
            content=record["content"],
            detail_url=record.get("detail_url"),
        )
