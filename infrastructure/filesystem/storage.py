# infrastructure/filesystem/storage.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from domain.errors import IOFailure
from domain.models import StorageArea

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


class StorageAreas:
    """
    Session and permanent roots supplied by the host platform. The roots are
    never created here and their absolute form is re-evaluated on every call.
    """
    def __init__(self, session_root: str | Path, permanent_root: str | Path) -> None:
        self._session_root = Path(session_root)
        self._permanent_root = Path(permanent_root)

    @classmethod
    def from_settings(cls, settings: Settings) -> StorageAreas:
        return cls(settings.session_area_path(), settings.permanent_area_path())

    def session_root(self) -> Path:
        return self._session_root.absolute()

    def permanent_root(self) -> Path:
        return self._permanent_root.absolute()

    def root_for(self, session_scoped: bool) -> Path:
        return self.session_root() if session_scoped else self.permanent_root()

    def locate(self, path: str | Path) -> tuple[StorageArea, PurePosixPath] | None:
        """
        Area holding `path` and the path relative to that area's root, or None
        for a foreign path. Prefix match on the normalized absolute paths
        (symlinks are not followed), session first.
        """
        src = Path(os.path.abspath(path))
        for area, root in (
            (StorageArea.SESSION, self.session_root()),
            (StorageArea.PERMANENT, self.permanent_root()),
        ):
            base = Path(os.path.abspath(root))
            if src.is_relative_to(base):
                return area, PurePosixPath(src.relative_to(base).as_posix())
        return None

    def area_containing(self, path: str | Path) -> StorageArea | None:
        found = self.locate(path)
        return found[0] if found else None


@dataclass(frozen=True)
class ManagedFile:
    relative_path: str
    session_scoped: bool
    areas: StorageAreas = field(repr=False, compare=False)

    @property
    def area(self) -> StorageArea:
        return StorageArea.SESSION if self.session_scoped else StorageArea.PERMANENT

    @property
    def name(self) -> str:
        return PurePosixPath(self.relative_path).name

    @property
    def path(self) -> Path:
        root = self.areas.root_for(self.session_scoped)
        return root.joinpath(*PurePosixPath(self.relative_path).parts)

    def absolute_path(self) -> str:
        return str(self.path)

    def exists(self) -> bool:
        return self.path.is_file()

    def create(self) -> bool:
        """
        Creates the file (and the folders between the area root and it).
        Returns False when the file was already there; its content is kept.
        """
        root = self.areas.root_for(self.session_scoped)
        fp = self.path
        if not root.is_dir():
            logger.error("Storage area root missing or not a directory: %s", root)
            raise IOFailure(f"Cannot create {fp}: storage area root {root} is not a directory")
        try:
            fp.parent.mkdir(parents=True, exist_ok=True)
            with fp.open("xb"):
                pass
        except FileExistsError as exc:
            if fp.is_file():
                logger.debug("File already exists, kept as is: %s", fp)
                return False
            raise IOFailure(f"Cannot create {fp}: path exists and is not a file") from exc
        except OSError as exc:
            logger.error("Create failed for %s: %s", fp, exc)
            raise IOFailure(f"Cannot create file {fp}") from exc
        logger.info("Created %s file %s", self.area.value, fp)
        return True

    def write_content(self, data: bytes) -> None:
        fp = self.path
        try:
            fp.write_bytes(data)
        except OSError as exc:
            logger.error("Write failed for %s: %s", fp, exc)
            raise IOFailure(f"Cannot write {len(data)} bytes to {fp}") from exc

    def read_content(self) -> bytes:
        fp = self.path
        try:
            return fp.read_bytes()
        except OSError as exc:
            logger.error("Read failed for %s: %s", fp, exc)
            raise IOFailure(f"Cannot read {fp}") from exc
