import os
from pathlib import Path

BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates"


def get_templates_dir() -> Path:
    return Path(os.getenv("TYPEWRITER_TEMPLATES_DIR", str(BUNDLED_TEMPLATES_DIR)))


def get_default_language() -> str:
    return os.getenv("TYPEWRITER_LANGUAGE", "flow")
