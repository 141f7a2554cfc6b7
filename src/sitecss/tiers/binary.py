"""Locate, and optionally download, a Tailwind CSS standalone CLI binary."""

from __future__ import annotations

import logging
import platform
import shutil
import stat
from pathlib import Path

import httpx

from sitecss.errors import EngineUnavailableError

logger = logging.getLogger(__name__)

RELEASE_URL = "https://github.com/tailwindlabs/tailwindcss/releases/download/v{version}/{asset}"

# (system, machine) -> release asset name
PLATFORM_ASSETS: dict[tuple[str, str], str] = {
    ("linux", "x86_64"): "tailwindcss-linux-x64",
    ("linux", "aarch64"): "tailwindcss-linux-arm64",
    ("linux", "arm64"): "tailwindcss-linux-arm64",
    ("darwin", "arm64"): "tailwindcss-macos-arm64",
    ("darwin", "x86_64"): "tailwindcss-macos-x64",
    ("windows", "x86_64"): "tailwindcss-windows-x64.exe",
}


def platform_key() -> tuple[str, str]:
    system = platform.system().lower()
    machine = platform.machine()
    if machine in ("AMD64", "amd64"):
        machine = "x86_64"
    return (system, machine)


class EngineBinary:
    """Resolve an engine binary for one pinned Tailwind version.

    Resolution order: explicit path, ``PATH`` lookup, cached pinned binary,
    then a download into the cache when ``allow_download`` is set.
    """

    def __init__(
        self,
        version: str,
        *,
        explicit_path: str = "",
        path_names: tuple[str, ...] = ("tailwindcss",),
        cache_dir: str | Path = "",
        allow_download: bool = False,
        download_timeout: float = 60.0,
        tier: str = "",
    ) -> None:
        self.version = version
        self.explicit_path = explicit_path
        self.path_names = path_names
        self.cache_dir = Path(cache_dir) if cache_dir else None
        self.allow_download = allow_download
        self.download_timeout = download_timeout
        self.tier = tier

    @property
    def cached_path(self) -> Path | None:
        if self.cache_dir is None:
            return None
        suffix = ".exe" if platform_key()[0] == "windows" else ""
        return self.cache_dir / f"tailwindcss-{self.version}{suffix}"

    def resolve(self) -> Path:
        """Return the binary path or raise EngineUnavailableError."""
        if self.explicit_path:
            path = Path(self.explicit_path)
            if path.is_file():
                return path
            raise EngineUnavailableError(
                f"Configured engine binary does not exist: {path}", tier=self.tier
            )

        for name in self.path_names:
            found = shutil.which(name)
            if found:
                return Path(found)

        cached = self.cached_path
        if cached is not None and cached.is_file():
            return cached

        if self.allow_download and cached is not None:
            return self.download(cached)

        raise EngineUnavailableError(
            f"Tailwind CSS v{self.version} CLI not found on PATH or in cache",
            tier=self.tier,
        )

    def download(self, target: Path) -> Path:
        """Fetch the pinned release asset for this platform into ``target``."""
        key = platform_key()
        asset = PLATFORM_ASSETS.get(key)
        if asset is None:
            raise EngineUnavailableError(
                f"No Tailwind CSS CLI release for {key[0]}/{key[1]}", tier=self.tier
            )
        url = RELEASE_URL.format(version=self.version, asset=asset)
        logger.info("Downloading Tailwind CSS CLI v%s for %s/%s", self.version, *key)
        try:
            with httpx.Client(follow_redirects=True, timeout=self.download_timeout) as client:
                resp = client.get(url)
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise EngineUnavailableError(
                f"Failed to download {url}: {exc}", tier=self.tier, cause=exc
            ) from exc

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(resp.content)
            target.chmod(target.stat().st_mode | stat.S_IEXEC)
        except OSError as exc:
            raise EngineUnavailableError(
                f"Failed to cache engine binary at {target}: {exc}", tier=self.tier, cause=exc
            ) from exc
        logger.info("Tailwind CSS CLI cached at %s", target)
        return target
