# domain/errors.py
from __future__ import annotations


class FileStagingError(Exception):
    """Base for every error raised while staging managed files."""


class InvalidArgument(FileStagingError, ValueError):
    """Blank desired name, missing/irregular external file or unknown option."""


class IOFailure(FileStagingError, OSError):
    """
    File-system failure (create, write, read) wrapped with the operation that
    was attempted. The original OSError is kept as __cause__.
    """
