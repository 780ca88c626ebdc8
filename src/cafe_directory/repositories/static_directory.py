"""In-memory implementation of CafeDirectory.

The listing is built once, either from the embedded defaults or from a
JSON data file, and is frozen afterwards: the mapping is a
``MappingProxyType`` and every city's cafés are a tuple. One instance is
shared read-only by all requests.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from cafe_directory.config import settings
from cafe_directory.dto import DirectoryFile
from cafe_directory.entities import CafeEntity
from cafe_directory.errors import DirectoryLoadError

from .default_data import DEFAULT_CAFES

logger = logging.getLogger(__name__)


class StaticCafeDirectory:
    """Read-only city -> cafés mapping.

    This class satisfies the CafeDirectory protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, listings: Mapping[str, Iterable[CafeEntity]]) -> None:
        """Initialize the directory.

        Args:
            listings: City key -> cafés in display order. Copied on construction.
        """
        self._listings: Mapping[str, tuple[CafeEntity, ...]] = MappingProxyType(
            {city: tuple(cafes) for city, cafes in listings.items()}
        )

    @classmethod
    def create(cls, path: str | Path | None = None) -> "StaticCafeDirectory":
        """Factory method to create StaticCafeDirectory with defaults.

        Args:
            path: JSON data file. If None, uses settings.cafe_data_path,
                  falling back to the embedded default listing.

        Returns:
            Configured StaticCafeDirectory

        Raises:
            DirectoryLoadError: If the data file is unreadable or invalid
        """
        path = path or settings.cafe_data_path
        if path:
            return cls.from_file(path)
        return cls(DEFAULT_CAFES)

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticCafeDirectory":
        """Load a directory from a UTF-8 JSON data file.

        City keys are lowercased; two keys that collide after lowercasing
        are rejected.

        Args:
            path: Path to the data file

        Returns:
            StaticCafeDirectory with the file's contents

        Raises:
            DirectoryLoadError: If the file is unreadable, malformed, or has
                                duplicate city keys
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DirectoryLoadError(f"Cannot read directory file {path}: {e}") from e

        try:
            data = DirectoryFile.model_validate_json(raw)
        except ValidationError as e:
            raise DirectoryLoadError(f"Invalid directory file {path}: {e}") from e

        listings: dict[str, tuple[CafeEntity, ...]] = {}
        for city, records in data.root.items():
            key = city.lower()
            if key in listings:
                raise DirectoryLoadError(f"Duplicate city {key!r} in directory file {path}")
            listings[key] = tuple(
                CafeEntity(
                    name=record.name,
                    address=record.address,
                    price_category=record.price_category,
                )
                for record in records
            )

        logger.info("Loaded %d cities from %s", len(listings), path)
        return cls(listings)

    def cities(self) -> list[str]:
        """Return the supported city keys, sorted."""
        return sorted(self._listings)

    def has_city(self, city: str) -> bool:
        """Check whether a city is a directory key."""
        return city in self._listings

    def get_cafes(self, city: str) -> tuple[CafeEntity, ...]:
        """Return the ordered cafés for a city.

        Raises:
            KeyError: If the city is not supported
        """
        return self._listings[city]

    def __len__(self) -> int:
        return len(self._listings)
