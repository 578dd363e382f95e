"""Fetch the breed catalog from TheDogAPI or a local JSON snapshot."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import requests
from pydantic import ValidationError
from tqdm import tqdm

from src.data.schemas import BreedRecord
from src.search.cache import ALL_BREEDS_KEY, ResponseCache

logger = logging.getLogger(__name__)

SNAPSHOT_FILENAME = "breeds.json"


class CatalogError(RuntimeError):
    """Raised when the breed catalog cannot be loaded."""


class BreedCatalog:
    """Read-only provider of breed records.

    Breeds come from a local snapshot when one is configured, otherwise
    from the TheDogAPI ``/breeds`` endpoint. The parsed list is kept in
    the injected cache so repeated searches do not refetch it.

    Args:
        base_url: TheDogAPI base URL, without trailing slash.
        api_key: Value for the ``x-api-key`` header. May be empty.
        cache: Shared response cache; when None nothing is cached.
        snapshot_path: Local JSON file to read instead of the API.
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = "https://api.thedogapi.com/v1",
        api_key: str = "",
        cache: ResponseCache | None = None,
        snapshot_path: Path | None = None,
        timeout: int = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.cache = cache
        self.snapshot_path = snapshot_path
        self.timeout = timeout

    def get_breeds(self) -> list[BreedRecord]:
        """Return every breed in catalog order.

        Raises:
            CatalogError: If the API or snapshot cannot be read.
        """
        if self.cache is not None:
            cached = self.cache.get(ALL_BREEDS_KEY)
            if cached is not None:
                return cached

        if self.snapshot_path is not None:
            raw = _read_snapshot(self.snapshot_path)
        else:
            raw = self._fetch_json("/breeds")

        breeds = parse_breeds(raw)
        if self.cache is not None:
            self.cache.set(ALL_BREEDS_KEY, breeds)
        return breeds

    def get_breed(self, breed_id: int) -> BreedRecord | None:
        """Look a single breed up by its catalog id."""
        for breed in self.get_breeds():
            if breed.id == breed_id:
                return breed
        return None

    def _fetch_json(self, path: str) -> object:
        url = f"{self.base_url}{path}"
        logger.info("Fetching breed catalog from %s", url)
        try:
            response = requests.get(url, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as err:
            raise CatalogError(f"Failed to fetch breeds from {url}: {err}") from err
        except ValueError as err:
            raise CatalogError(f"Invalid JSON from {url}: {err}") from err

    def _headers(self) -> dict[str, str]:
        return {"x-api-key": self.api_key} if self.api_key else {}


def parse_breeds(raw: object) -> list[BreedRecord]:
    """Validate raw catalog JSON into BreedRecord objects.

    Entries that fail validation are skipped with a warning.

    Args:
        raw: Decoded JSON; expected to be a list of objects.

    Returns:
        List of BreedRecord objects in input order.

    Raises:
        CatalogError: If *raw* is not a list.
    """
    if not isinstance(raw, list):
        raise CatalogError(f"Expected a list of breeds, got {type(raw).__name__}")

    breeds = []
    for index, entry in enumerate(raw):
        try:
            breeds.append(BreedRecord.model_validate(entry))
        except ValidationError as err:
            logger.warning("Skipping invalid breed entry #%d: %s", index, err)

    logger.info("Catalog: %d entries, %d valid breeds", len(raw), len(breeds))
    return breeds


def download_catalog(
    data_dir: Path,
    base_url: str = "https://api.thedogapi.com/v1",
    api_key: str = "",
    timeout: int = 30,
) -> Path:
    """Download the full breed list to ``data_dir/breeds.json``.

    Args:
        data_dir: Directory for the snapshot file.
        base_url: TheDogAPI base URL.
        api_key: Optional TheDogAPI key.
        timeout: HTTP timeout in seconds.

    Returns:
        Path to the written snapshot.

    Raises:
        CatalogError: If the download fails.
    """
    data_dir.mkdir(parents=True, exist_ok=True)
    dest = data_dir / SNAPSHOT_FILENAME
    partial = dest.with_name(dest.name + ".part")
    url = f"{base_url.rstrip('/')}/breeds"
    headers = {"x-api-key": api_key} if api_key else {}

    logger.info("Downloading breed catalog to %s...", dest)
    try:
        response = requests.get(url, stream=True, timeout=timeout, headers=headers)
        response.raise_for_status()

        total_size = int(response.headers.get("content-length", 0))
        with (
            open(partial, "wb") as f,
            tqdm(total=total_size, unit="B", unit_scale=True) as pbar,
        ):
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
                pbar.update(len(chunk))
        partial.replace(dest)
    except (requests.RequestException, OSError) as err:
        partial.unlink(missing_ok=True)
        raise CatalogError(f"Failed to download {url}: {err}") from err

    return dest


def _read_snapshot(path: Path) -> object:
    logger.info("Loading breed catalog from %s", path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as err:
        raise CatalogError(f"Cannot read catalog snapshot {path}: {err}") from err
