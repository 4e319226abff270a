"""Pydantic models for release API payloads."""

from pydantic import BaseModel, ConfigDict, Field


class ReleaseAsset(BaseModel):
    """A downloadable file attached to a release."""

    model_config = ConfigDict(extra="ignore")

    id: int
    url: str
    name: str | None = None
    label: str | None = None
    content_type: str = "application/octet-stream"
    size: int = Field(0, ge=0)


class Release(BaseModel):
    """A published release."""

    model_config = ConfigDict(extra="ignore")

    id: int
    url: str
    tag_name: str
    name: str | None = None
    body: str | None = None
    draft: bool = False
    prerelease: bool = False
    assets: list[ReleaseAsset] = Field(default_factory=list)

    def find_asset(self, asset_name: str) -> ReleaseAsset | None:
        """Return the asset with the given file name, if any."""
        for asset in self.assets:
            if asset.name is not None and asset.name == asset_name:
                return asset
        return None
