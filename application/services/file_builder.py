# application/services/file_builder.py
from __future__ import annotations
import logging
from pathlib import Path, PurePosixPath
from typing import Callable

from domain.errors import InvalidArgument, IOFailure
from domain.models import PlacementOptions, StorageArea
from infrastructure.filesystem.storage import ManagedFile, StorageAreas
from infrastructure.filesystem.tokens import TokenSource, UuidTokens, epoch_millis

logger = logging.getLogger(__name__)


class FileStagingBuilder:
    """
    Places files in the host's managed storage areas.

    Usage:
        ref = FileStagingBuilder.for_name("report.txt", areas) \\
            .store_permanently() \\
            .create_file_with_content(b"...")

    Defaults: session area, inside a freshly generated unique folder.
    Configuration calls return the same builder and the last one wins.
    """

    def __init__(self, desired_name: str, areas: StorageAreas, *, tokens: TokenSource | None = None) -> None:
        if desired_name is None or not str(desired_name).strip():
            raise InvalidArgument("File name should not be null or empty")
        parts = PurePosixPath(str(desired_name).replace("\\", "/"))
        if parts.is_absolute() or ".." in parts.parts:
            raise InvalidArgument(f"File name must stay inside the storage area: {desired_name!r}")
        self.options = PlacementOptions(desired_name=desired_name)
        self.areas = areas
        self.tokens = tokens or UuidTokens()

    # ───────── factories ─────────
    @classmethod
    def for_name(cls, name: str, areas: StorageAreas, *, tokens: TokenSource | None = None) -> FileStagingBuilder:
        return cls(name, areas, tokens=tokens).this_session_only().put_in_unique_folder()

    @classmethod
    def empty(
        cls,
        areas: StorageAreas,
        *,
        tokens: TokenSource | None = None,
        clock: Callable[[], int] = epoch_millis,
    ) -> FileStagingBuilder:
        """
        Builder for a placeholder named temp<epochMillis>.temp. Handy to hold
        an inert reference instead of one pointing at an area root.
        """
        return cls.for_name(f"temp{clock()}.temp", areas, tokens=tokens)

    @classmethod
    def copy_from_path(
        cls, path: str | Path, areas: StorageAreas, *, tokens: TokenSource | None = None
    ) -> ManagedFile:
        """
        Turns an arbitrary file into a managed one.

        A file already under the session or permanent root is only recognized:
        the returned reference points at the very same file and nothing is
        copied. Any other file is read whole and copied into a new session
        file inside a unique folder.
        """
        if path is None or not Path(path).is_file():
            raise InvalidArgument(f"The file is invalid (not exist or not a file): {path}")

        source = Path(path)
        found = areas.locate(source)
        if found is not None:
            area, relative = found
            builder = cls(relative.as_posix(), areas, tokens=tokens).put_directly_in_target_folder()
            if area is StorageArea.SESSION:
                builder.this_session_only()
            else:
                builder.store_permanently()
            logger.debug("Already a managed %s file: %s", area.value, source)
            return builder.get_file()

        try:
            content = source.read_bytes()
        except OSError as exc:
            logger.error("Cannot read %s: %s", source, exc)
            raise IOFailure(f"Fail to copy from file {source}") from exc

        staged = cls.for_name(source.name, areas, tokens=tokens) \
            .this_session_only() \
            .put_in_unique_folder() \
            .create_file_with_content(content)
        logger.info("Imported %s (%d bytes) -> %s", source, len(content), staged.absolute_path())
        return staged

    # ───────── configuration ─────────
    def this_session_only(self) -> FileStagingBuilder:
        self.options.use_session_area = True
        return self

    def store_permanently(self) -> FileStagingBuilder:
        self.options.use_session_area = False
        return self

    def put_in_unique_folder(self) -> FileStagingBuilder:
        self.options.use_unique_folder = True
        return self

    def put_directly_in_target_folder(self) -> FileStagingBuilder:
        self.options.use_unique_folder = False
        return self

    # ───────── resolution ─────────
    def get_file(self) -> ManagedFile:
        """
        Reference only, nothing is written. With a unique folder active every
        call draws a new token, so two calls give two different paths.
        """
        relative = self._unique_folder() + self.options.desired_name
        ref = ManagedFile(relative, self.options.use_session_area, self.areas)
        logger.debug("Resolved %s reference %s", self.options.area.value, relative)
        return ref

    def create_file(self) -> ManagedFile:
        ref = self.get_file()
        ref.create()
        return ref

    def create_file_with_content(self, content: bytes) -> ManagedFile:
        """
        Creates the file and replaces its content. If writing fails the empty
        file stays where it is.
        """
        ref = self.create_file()
        ref.write_content(content)
        return ref

    def create_file_with_text(self, text: str, encoding: str = "utf-8") -> ManagedFile:
        return self.create_file_with_content(text.encode(encoding))

    def _unique_folder(self) -> str:
        return self.tokens.next() + "/" if self.options.use_unique_folder else ""
