"""
Settings for HanziCards.

Values come from, in increasing priority:
- built-in defaults
- an optional config.yaml
- .env / process environment (HANZICARDS_* variables)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from hanzicards.classroom.progress import DEFAULT_GRADE
from hanzicards.classroom.store import DEFAULT_PROGRESS_DB
from hanzicards.viewer.audio import (
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_SPEAKING_RATE,
    DEFAULT_VOICE_NAME,
)


PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config.yaml"

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    data_path: Path
    progress_db: Path
    audio_dir: Path
    default_grade: str
    tts_language: str
    tts_voice: str
    speaking_rate: float
    page_size: int
    log_level: str


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        logger.warning(f"Ignoring {path}: expected a mapping")
        return {}
    return cfg


def load_settings(config_path: Optional[Path] = None, env_file: Optional[Path] = None) -> Settings:
    """
    Build Settings from defaults, config.yaml and the environment.

    Args:
        config_path: YAML file (default: config.yaml at the project root)
        env_file: .env file (default: .env at the project root)
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")
    cfg = _read_yaml(Path(config_path) if config_path else DEFAULT_CONFIG_PATH)

    def get(name: str, key: str, default: Any) -> Any:
        # Environment overrides the YAML file.
        value = os.getenv(name)
        if value is not None and value.strip() != "":
            return value.strip()
        return cfg.get(key, default)

    return Settings(
        data_path=Path(get("HANZICARDS_DATA_PATH", "data_path", PROJECT_ROOT / "data" / "data.json")),
        progress_db=Path(get("HANZICARDS_PROGRESS_DB", "progress_db", DEFAULT_PROGRESS_DB)).expanduser(),
        audio_dir=Path(get("HANZICARDS_AUDIO_DIR", "audio_dir", PROJECT_ROOT / "data" / "audio")),
        default_grade=str(get("HANZICARDS_DEFAULT_GRADE", "default_grade", DEFAULT_GRADE)),
        tts_language=str(get("HANZICARDS_TTS_LANGUAGE", "tts_language", DEFAULT_LANGUAGE_CODE)),
        tts_voice=str(get("HANZICARDS_TTS_VOICE", "tts_voice", DEFAULT_VOICE_NAME)),
        speaking_rate=float(get("HANZICARDS_SPEAKING_RATE", "speaking_rate", DEFAULT_SPEAKING_RATE)),
        page_size=int(get("HANZICARDS_PAGE_SIZE", "page_size", 4)),
        log_level=str(get("HANZICARDS_LOG_LEVEL", "log_level", "INFO")).upper(),
    )


def setup_logging(level: str = "INFO"):
    """Configure root logging for entry points."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s"
    )
