from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent

DEFAULTS: Dict[str, Any] = {
    "principal": 10_000,
    "annual_rate_percent": 6.0,
    "term_months": 12,
    "currency_symbol": "$",
    "principal_color": "#5c9efa",
    "interest_color": "#fa5c6a",
    "log_level": "INFO",
}


def _load_yaml(path: Path = BASE_DIR / "config.yaml") -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


def load_config(path: Path = BASE_DIR / "config.yaml") -> Dict[str, Any]:
    """Merge the YAML file over the built-in defaults."""
    return {**DEFAULTS, **_load_yaml(path)}


CFG = load_config()

# Form defaults
PRINCIPAL: float = float(CFG["principal"])
ANNUAL_RATE_PERCENT: float = float(CFG["annual_rate_percent"])  # 5.5 means 5.5%
TERM_MONTHS: int = int(CFG["term_months"])

# Display
CURRENCY_SYMBOL: str = str(CFG["currency_symbol"])
PRINCIPAL_COLOR: str = str(CFG["principal_color"])
INTEREST_COLOR: str = str(CFG["interest_color"])

LOG_LEVEL: str = str(CFG["log_level"]).upper()
