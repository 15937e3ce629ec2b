# domain/models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class StorageArea(str, Enum):
    SESSION = "session"
    PERMANENT = "permanent"


@dataclass
class PlacementOptions:
    desired_name: str
    use_session_area: bool = True
    use_unique_folder: bool = True

    @property
    def area(self) -> StorageArea:
        return StorageArea.SESSION if self.use_session_area else StorageArea.PERMANENT
