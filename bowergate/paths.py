"""Filesystem locations used by the install gate."""

import os
from dataclasses import dataclass
from pathlib import Path

MANIFEST_NAME = "bower.json"
BOWERRC_NAME = ".bowerrc"
CHECKSUM_NAME = ".bower-checksum"


@dataclass(frozen=True)
class GatePaths:
    """Public-assets root and cache root for one application."""
    public_path: Path
    cache_path: Path

    @property
    def manifest_path(self) -> Path:
        return self.public_path / MANIFEST_NAME

    @property
    def bowerrc_path(self) -> Path:
        return self.public_path / BOWERRC_NAME

    @property
    def checksum_path(self) -> Path:
        return self.cache_path / CHECKSUM_NAME

    def target_directory(self, directory: str) -> Path:
        """Resolve the configured install directory under the public root."""
        return self.public_path / directory.lstrip("/")

    @classmethod
    def from_env(
        cls,
        public_path: str | Path | None = None,
        cache_path: str | Path | None = None,
    ) -> "GatePaths":
        """Build paths from explicit values, then environment, then defaults.

        Priority per root:
        1. Explicit argument
        2. BOWERGATE_PUBLIC_PATH / BOWERGATE_CACHE_PATH
        3. ./public and ./cache
        """
        public = public_path or os.environ.get("BOWERGATE_PUBLIC_PATH") or "public"
        cache = cache_path or os.environ.get("BOWERGATE_CACHE_PATH") or "cache"
        return cls(public_path=Path(public), cache_path=Path(cache))


__all__ = [
    "MANIFEST_NAME",
    "BOWERRC_NAME",
    "CHECKSUM_NAME",
    "GatePaths",
]
