"""
Settings Module
Runtime configuration for the class suggestor, read from the environment.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_PACKAGE = "@groww-tech/mint-css"

ENV_PREFIX = "CSS_SUGGESTOR_"

@dataclass(frozen=True)
class Settings:
    package_name: str = DEFAULT_PACKAGE
    project_root: Optional[Path] = field(default_factory=Path.cwd)
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from CSS_SUGGESTOR_* variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        settings = cls()

        overrides = {}
        if environ.get(ENV_PREFIX + "PACKAGE"):
            overrides['package_name'] = environ[ENV_PREFIX + "PACKAGE"]
        if environ.get(ENV_PREFIX + "PROJECT_ROOT"):
            overrides['project_root'] = Path(environ[ENV_PREFIX + "PROJECT_ROOT"])
        if environ.get(ENV_PREFIX + "LOG_LEVEL"):
            overrides['log_level'] = environ[ENV_PREFIX + "LOG_LEVEL"].upper()
        if environ.get(ENV_PREFIX + "HOST"):
            overrides['host'] = environ[ENV_PREFIX + "HOST"]
        if environ.get(ENV_PREFIX + "PORT"):
            port = environ[ENV_PREFIX + "PORT"]
            try:
                overrides['port'] = int(port)
            except ValueError:
                raise ValueError(f"Invalid {ENV_PREFIX}PORT: {port!r}") from None

        return replace(settings, **overrides)
