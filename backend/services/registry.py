import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DATA_EXTENSION = ".json"
# Aggregate file kept alongside the per-country datasets; never listed as a country.
RESERVED_FILENAME = "data.json"


class RegistryError(RuntimeError):
    """The data directory could not be scanned at startup."""


class CountryNotFound(LookupError):
    def __init__(self, requested: str, available: list[str]):
        super().__init__(f"Country not found: {requested}")
        self.requested = requested
        self.available = available


class DatasetRegistry(BaseModel):
    """Allowlist of dataset files, taken from a single directory listing.

    Built once when the application starts. Lookups never touch the file
    system with a caller-provided code unless that code passed ``is_allowed``.
    """

    model_config = ConfigDict(frozen=True)

    data_dir: Path
    files: frozenset[str]

    @classmethod
    def scan(cls, data_dir: str | os.PathLike) -> "DatasetRegistry":
        data_dir = Path(data_dir)
        try:
            entries = os.listdir(data_dir)
        except OSError as e:
            logger.error("Cannot read data directory %s: %s", data_dir, e)
            raise RegistryError(f"Cannot read data directory {data_dir}: {e}") from e

        files = frozenset(f for f in entries if f.endswith(DATA_EXTENSION))
        logger.info("Registered %d dataset files from %s", len(files), data_dir)
        return cls(data_dir=data_dir, files=files)

    def countries(self) -> list[str]:
        return sorted(
            f[: -len(DATA_EXTENSION)] for f in self.files if f != RESERVED_FILENAME
        )

    def filename_for(self, code: str) -> str:
        return f"{code.lower()}{DATA_EXTENSION}"

    def is_allowed(self, code: str) -> bool:
        return self.filename_for(code) in self.files

    def path_for(self, code: str) -> Path:
        if not self.is_allowed(code):
            logger.debug("Rejected unknown country code %r", code)
            raise CountryNotFound(code, self.countries())
        return self.data_dir / self.filename_for(code)
