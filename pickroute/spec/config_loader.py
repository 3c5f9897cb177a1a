import json
import logging
from pathlib import Path
from typing import Dict, Any

import yaml

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    if suffix in {".yml", ".yaml"}:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    raise ValueError(f"Formato no soportado: {path.suffix} (usa .json o .yaml)")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Handler de consola para el paquete; idempotente."""
    logger = logging.getLogger("pickroute")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
