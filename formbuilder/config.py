import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# Where saved form layouts are kept (one JSON file per storage key)
STORE_DIR = Path(os.getenv("FORMBUILDER_STORE_DIR", str(Path.home() / ".formbuilder")))
STORAGE_KEY = os.getenv("FORMBUILDER_STORAGE_KEY", "formData")

# --- Logging ---
LOG_FILE = os.getenv("FORMBUILDER_LOG_FILE", "formbuilder.log")
VERBOSE_CONSOLE = os.getenv("FORMBUILDER_VERBOSE", "false").lower() == "true"

# --- PDF export / preview ---
PREVIEW_ZOOM = env_float("FORMBUILDER_PREVIEW_ZOOM", "1.25")
EXPORT_TITLE = os.getenv("FORMBUILDER_EXPORT_TITLE", "Form")
