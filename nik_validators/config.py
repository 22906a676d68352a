"""
Runtime configuration

Every setting comes from the environment, with a default that works out of
the box:

    NIK_WILAYAH_PATH   region table (default: bundled assets/wilayah.json)
    NIK_LOG_LEVEL      logging level name (default: INFO)
    NIK_LOG_FILE       optional log file; console only when unset
"""
import os
from typing import Optional

DEFAULT_WILAYAH_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'assets', 'wilayah.json'
)


class Config:
    """Environment-backed settings"""

    WILAYAH_PATH_ENV = 'NIK_WILAYAH_PATH'
    LOG_LEVEL_ENV = 'NIK_LOG_LEVEL'
    LOG_FILE_ENV = 'NIK_LOG_FILE'

    def __init__(self, environ: Optional[dict] = None):
        self._environ = os.environ if environ is None else environ

    def get_wilayah_path(self) -> str:
        return self._environ.get(self.WILAYAH_PATH_ENV) or DEFAULT_WILAYAH_PATH

    def get_log_level(self) -> str:
        return (self._environ.get(self.LOG_LEVEL_ENV) or 'INFO').upper()

    def get_log_file(self) -> Optional[str]:
        return self._environ.get(self.LOG_FILE_ENV) or None

    def is_custom_wilayah(self) -> bool:
        """True when the region table is overridden by NIK_WILAYAH_PATH"""
        return bool(self._environ.get(self.WILAYAH_PATH_ENV))
