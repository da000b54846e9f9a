"""
Configuration loading for Lettersmith.

Layers, later overriding earlier:
1. Packaged defaults (lettersmith/config/defaults.yaml)
2. User config file (explicit path, else LETTERSMITH_CONFIG_PATH env variable)
3. Dotlist overrides (e.g., ["targeting.top_n=30", "markers.open=<<"])

Examples:
    >>> cfg = load_config()
    >>> cfg.targeting.top_n
    20

    >>> cfg = load_config(overrides=["fields.max_length=30"])
    >>> cfg.fields.max_length
    30
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()
DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"


def _user_config_path(config_path: Optional[Path]) -> Optional[Path]:
    if config_path is not None:
        return Path(config_path)
    env_path = os.getenv("LETTERSMITH_CONFIG_PATH")
    return Path(env_path) if env_path else None


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[List[str]] = None,
) -> DictConfig:
    """
    Load the merged Lettersmith configuration.

    Args:
        config_path: Optional user YAML (defaults to LETTERSMITH_CONFIG_PATH env variable)
        overrides: Optional dotlist overrides applied last

    Returns:
        Merged DictConfig

    Raises:
        FileNotFoundError: If an explicit or env-configured user file does not exist
    """
    layers = [OmegaConf.load(DEFAULTS_PATH)]

    user_path = _user_config_path(config_path)
    if user_path is not None:
        if not user_path.exists():
            raise FileNotFoundError(f"Config file not found: {user_path}")
        layers.append(OmegaConf.load(user_path))

    if overrides:
        layers.append(OmegaConf.from_dotlist(list(overrides)))

    return OmegaConf.merge(*layers)
