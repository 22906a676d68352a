"""
Region code directory (wilayah)

[Table format]
    {
        "provinsi":  {"32": "JAWA BARAT", ...},
        "kabkot":    {"3273": "KOTA BANDUNG", ...},
        "kecamatan": {"327301": "SUKASARI -- 40151", ...}
    }

Sub-district values carry the postal code after the first "--".
The table is loaded once and never mutated.
"""
import json
import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .config import Config
from .exceptions import RegionDataError, RegionDataNotFoundError
from .utils.logger import get_logger

logger = get_logger(__name__)

POSTAL_DELIMITER = '--'

TABLE_KEYS = ('provinsi', 'kabkot', 'kecamatan')

# public domain name -> key in the table
DOMAIN_KEYS = {
    'province': 'provinsi',
    'city': 'kabkot',
    'subDistrict': 'kecamatan',
    'sub_district': 'kecamatan',
}


def split_sub_district(value: str) -> Tuple[str, Optional[str]]:
    """
    Split "<name>--<postal code>" on the first delimiter

    Returns:
        (name, postal_code): postal_code is None without a delimiter and
        '' when the part after it is blank
    """
    parts = value.split(POSTAL_DELIMITER, 1)
    name = parts[0].strip()
    postal = parts[1].strip() if len(parts) > 1 else None
    return name, postal


class RegionDirectory:
    """Read-only province / city / sub-district lookup"""

    def __init__(self, data: Mapping, source: Optional[str] = None):
        if not isinstance(data, Mapping):
            raise RegionDataError(
                f"Region data must be a JSON object: {source or '<memory>'}"
            )

        tables = {}
        for key in TABLE_KEYS:
            table = data.get(key) or {}
            if not isinstance(table, Mapping):
                raise RegionDataError(
                    f"Region data '{key}' must be an object: {source or '<memory>'}"
                )
            tables[key] = MappingProxyType(
                {str(k): str(v) for k, v in table.items() if v is not None}
            )

        self._tables: Mapping[str, Mapping[str, str]] = MappingProxyType(tables)
        self.source = source

    @classmethod
    def load(cls, path: str) -> 'RegionDirectory':
        """
        Load the region table from a JSON file

        Raises:
            RegionDataNotFoundError: file does not exist
            RegionDataError: file unreadable, not valid JSON, or missing
                one of the provinsi / kabkot / kecamatan tables
        """
        if not os.path.exists(path):
            logger.error(f"Wilayah file not found: {path}")
            raise RegionDataNotFoundError(f"Wilayah file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse wilayah file {path}: {e}")
            raise RegionDataError(f"Failed to parse wilayah file: {path}") from e
        except OSError as e:
            logger.error(f"Failed to read wilayah file {path}: {e}")
            raise RegionDataError(f"Failed to read wilayah file: {path}") from e

        if isinstance(data, Mapping):
            for key in TABLE_KEYS:
                if key not in data:
                    logger.error(f"Wilayah file {path} has no '{key}' table")
                    raise RegionDataError(f"Wilayah file missing '{key}': {path}")

        directory = cls(data, source=path)
        logger.info(
            f"Wilayah loaded from {path}: "
            f"{len(directory.provinces)} provinces, "
            f"{len(directory.cities)} cities, "
            f"{len(directory.sub_districts)} sub-districts"
        )
        return directory

    # ============================================================
    # Raw tables
    # ============================================================

    @property
    def provinces(self) -> Mapping[str, str]:
        return self._tables['provinsi']

    @property
    def cities(self) -> Mapping[str, str]:
        return self._tables['kabkot']

    @property
    def sub_districts(self) -> Mapping[str, str]:
        return self._tables['kecamatan']

    # ============================================================
    # Lookups
    # ============================================================

    def lookup(self, domain: str, code: str) -> Optional[str]:
        """
        Look up a code in one domain

        Args:
            domain: 'province', 'city' or 'subDistrict'
            code: 2, 4 or 6 digit code

        Returns:
            Region name, or None for an unknown code. Sub-district names are
            returned without the postal code.
        """
        key = DOMAIN_KEYS.get(domain)
        if key is None:
            raise ValueError(f"Unknown region domain: {domain}")

        value = self._tables[key].get(code)
        if value is None:
            return None
        if key == 'kecamatan':
            return split_sub_district(value)[0]
        return value

    def province(self, code: str) -> Optional[str]:
        return self.lookup('province', code)

    def city(self, code: str) -> Optional[str]:
        return self.lookup('city', code)

    def sub_district(self, code: str) -> Optional[str]:
        return self.lookup('subDistrict', code)

    def postal_code(self, code: str) -> Optional[str]:
        value = self.sub_districts.get(code)
        if value is None:
            return None
        return split_sub_district(value)[1]

    def __repr__(self) -> str:
        return f"RegionDirectory(source={self.source!r})"


# shared directories, one per source path
_directories: Dict[str, RegionDirectory] = {}


def get_default_directory(path: Optional[str] = None) -> RegionDirectory:
    """
    Return the shared directory for a source path, loading it on first use

    Args:
        path: region table; defaults to Config().get_wilayah_path()
    """
    path = os.path.abspath(path or Config().get_wilayah_path())

    directory = _directories.get(path)
    if directory is None:
        directory = RegionDirectory.load(path)
        _directories[path] = directory
    return directory


def clear_directory_cache():
    """Forget shared directories (tests, or after replacing the table on disk)"""
    _directories.clear()
