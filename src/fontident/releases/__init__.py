"""Release fetching: list releases, find one by tag, download named assets."""

from .client import ReleaseClient
from .models import Release, ReleaseAsset

__all__ = ["Release", "ReleaseAsset", "ReleaseClient"]
