# config/settings.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    # Area roots owned by the host platform (must already exist)
    SESSION_AREA_ROOT: str = os.getenv("SESSION_AREA_ROOT", "./_tmp/session")
    PERMANENT_AREA_ROOT: str = os.getenv("PERMANENT_AREA_ROOT", "./_files")

    # Unique folder token: uuid | time
    UNIQUE_TOKEN_MODE: str = os.getenv("UNIQUE_TOKEN_MODE", "uuid")

    # ───────── helpers ─────────
    def session_area_path(self) -> Path:
        return Path(self.SESSION_AREA_ROOT).resolve()

    def permanent_area_path(self) -> Path:
        return Path(self.PERMANENT_AREA_ROOT).resolve()

    def token_mode(self) -> str:
        return (self.UNIQUE_TOKEN_MODE or "").strip().lower()
