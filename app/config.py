"""Runtime settings for document generation and the HTTP surface.

Each field can be replaced by an environment variable of the same name;
``SCRIPT_CANDIDATES`` takes a comma-separated list.
"""
import os
from dataclasses import dataclass, field, fields
from typing import List


@dataclass
class Settings:
    # Canonical fallback when the record carries no canonical URL
    PLACEHOLDER_URL: str = "https://example.com/"

    # Static-file root that auxiliary page folders live under
    PUBLIC_ROOT: str = "public"

    # Bootstrap script of the main page
    MAIN_SCRIPT_SRC: str = "./src/main.tsx"

    # Lookup order for auxiliary pages: dev path first, then the production bundle
    SCRIPT_CANDIDATES: List[str] = field(
        default_factory=lambda: ["/src/main.tsx", "/assets/app.js"]
    )

    THEME_COLOR: str = "#1d7bf5"

    LOG_LEVEL: str = "INFO"
    RATE_LIMIT: str = "30/minute"

    def __post_init__(self):
        for setting in fields(self):
            raw = os.environ.get(setting.name)
            if raw is None:
                continue
            if setting.name == "SCRIPT_CANDIDATES":
                setattr(self, setting.name, [path.strip() for path in raw.split(",") if path.strip()])
            else:
                setattr(self, setting.name, raw)


settings = Settings()
