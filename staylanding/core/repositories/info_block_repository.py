from __future__ import annotations

from abc import ABC, abstractmethod

from staylanding.core.entities.info_block import InfoBlock


class InfoBlockRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[InfoBlock]:
        """Return every info block, in display order."""
        raise NotImplementedError
