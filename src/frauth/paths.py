"""
Filesystem layout: data dir (holds the secrets file) and cache dir.
"""
import os
from pathlib import Path
from typing import Optional

import platformdirs

APP_NAME = 'frauth'
USER_INFO_FILE = 'user_info.toml'


class Paths:
    def __init__(self, base_data: Path, base_cache: Path):
        self.base_data = Path(base_data)
        self.base_cache = Path(base_cache)

    @property
    def user_info(self) -> Path:
        """The secrets file."""
        return self.base_data / USER_INFO_FILE

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> 'Paths':
        """FRAUTH_DATA_DIR / FRAUTH_CACHE_DIR, else the per-user platform dirs."""
        env = os.environ if environ is None else environ
        data = env.get('FRAUTH_DATA_DIR') or platformdirs.user_data_dir(APP_NAME)
        cache = env.get('FRAUTH_CACHE_DIR') or platformdirs.user_cache_dir(APP_NAME)
        return cls(Path(data), Path(cache))

    def __repr__(self) -> str:
        return f"Paths(base_data={str(self.base_data)!r}, base_cache={str(self.base_cache)!r})"
