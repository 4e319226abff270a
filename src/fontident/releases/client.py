"""
Release Client
==============

Lists published releases, finds a release by tag and downloads named release
assets to disk.
"""

import logging
import tempfile
from pathlib import Path

import requests
from pydantic import ValidationError as PydanticValidationError
from tqdm import tqdm

from fontident.core.config import ReleaseClientConfig
from fontident.core.exceptions import (
    AssetWriteError,
    ReleaseAssetNotFoundError,
    ReleaseNotFoundError,
    ReleaseRequestError,
)

from .models import Release

logger = logging.getLogger(__name__)


class ReleaseClient:
    """Client for the release API of a single repository."""

    def __init__(self, config: ReleaseClientConfig | None = None):
        self.config = config or ReleaseClientConfig()
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with the API headers."""
        session = requests.Session()
        session.headers.update(
            {
                "User-Agent": self.config.user_agent,
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": self.config.api_version,
            }
        )
        return session

    @property
    def releases_url(self) -> str:
        return f"{self.config.api_url}/repos/{self.config.owner}/{self.config.repo}/releases"

    def fetch_releases(self) -> list[Release]:
        """Fetch all releases of the configured repository."""
        logger.info(f"Fetching releases from {self.releases_url}")
        try:
            response = self.session.get(self.releases_url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ReleaseRequestError("send releases request", str(e)) from e
        except ValueError as e:
            raise ReleaseRequestError("decode releases response", str(e)) from e

        try:
            releases = [Release.model_validate(item) for item in payload]
        except (PydanticValidationError, TypeError) as e:
            raise ReleaseRequestError("decode releases response", str(e)) from e

        logger.debug(f"Fetched {len(releases)} releases")
        return releases

    def fetch_release(self, tag: str) -> Release:
        """
        Find the release carrying the given tag.

        Raises:
            ReleaseNotFoundError: If no release has the tag
        """
        for release in self.fetch_releases():
            if release.tag_name == tag:
                return release
        raise ReleaseNotFoundError(tag)

    def fetch_release_for_version(self, version: str) -> Release:
        return self.fetch_release(f"v{version}")

    def fetch_release_asset(
        self, release: Release, asset_name: str, target_dir: Path | None = None
    ) -> Path:
        """
        Download a named asset of a release.

        Args:
            release: Release to download from
            asset_name: File name of the asset
            target_dir: Directory to write into, defaults to the working directory

        Returns:
            Path of the written file

        Raises:
            ReleaseAssetNotFoundError: If the release has no asset with that name
        """
        asset = release.find_asset(asset_name)
        if asset is None:
            raise ReleaseAssetNotFoundError(asset_name, release.tag_name)

        target_dir = Path(target_dir) if target_dir is not None else Path.cwd()
        file_path = target_dir / asset_name
        logger.info(f"Downloading asset '{asset_name}' of release '{release.tag_name}'")

        try:
            response = self.session.get(
                asset.url,
                headers={"Accept": "application/octet-stream"},
                stream=True,
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise ReleaseRequestError("send asset download request", str(e)) from e

        total_size = int(response.headers.get("content-length", 0) or asset.size)
        temp_path = None
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=target_dir, delete=False, suffix=".tmp"
            ) as temp_file:
                temp_path = Path(temp_file.name)
                with tqdm(
                    total=total_size,
                    unit="B",
                    unit_scale=True,
                    unit_divisor=1024,
                    desc=f"Downloading {asset_name}",
                    disable=not self.config.show_progress,
                ) as pbar:
                    for chunk in response.iter_content(chunk_size=self.config.chunk_size):
                        if chunk:
                            temp_file.write(chunk)
                            pbar.update(len(chunk))
            temp_path.replace(file_path)
        except requests.RequestException as e:
            self._cleanup(temp_path)
            raise ReleaseRequestError("get asset download response bytes", str(e)) from e
        except OSError as e:
            self._cleanup(temp_path)
            raise AssetWriteError(str(file_path), str(e)) from e

        logger.info(f"Asset downloaded successfully to: {file_path}")
        return file_path

    @staticmethod
    def _cleanup(temp_path: Path | None) -> None:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ReleaseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
