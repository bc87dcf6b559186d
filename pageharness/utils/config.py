import os
import yaml
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional


HEADED_ENV_VAR = "HEADED"


@dataclass
class HarnessConfig:
    # Browser
    headless: bool = True
    browser: str = "chromium"  # "chromium", "firefox" or "webkit"
    viewport_width: int = 1280
    viewport_height: int = 720

    # Timeouts (ms)
    step_timeout_ms: int = 30000
    session_timeout_ms: int = 60000

    # Root URL overrides per logical page name, e.g. {"example": "http://localhost:8000"}
    base_urls: Dict[str, str] = field(default_factory=dict)

    @property
    def viewport(self) -> dict:
        return {"width": self.viewport_width, "height": self.viewport_height}

    @classmethod
    def load(cls, path: Optional[str] = None) -> "HarnessConfig":
        if not path:
            return cls()

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, path: Optional[str] = None) -> "HarnessConfig":
        """Loads the config and applies the HEADED toggle ("true" or "1" launches a visible browser)."""
        environ = os.environ if environ is None else environ
        config = cls.load(path)
        headed = environ.get(HEADED_ENV_VAR, "")
        if headed in ("true", "1"):
            config.headless = False
        return config
