"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from news_verifier.config.models import VerifierConfig


def get_default_config_path() -> Path:
    """Get path to the bundled ``configs/default.yaml``."""
    return Path(__file__).parents[3] / "configs" / "default.yaml"


def load_config(path: Path | str | None = None) -> VerifierConfig:
    """Load the verifier configuration from a YAML file.

    Sections left out of the file (``newsapi``, ``outlets``, ``reasoner``,
    ``scoring``, ``logging``) keep their defaults, and an empty file yields
    the default configuration.

    Args:
        path: Path to YAML config file. Defaults to the bundled config.

    Returns:
        Validated VerifierConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the file's top level is not a mapping.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path) if path is not None else get_default_config_path()
    with path.open() as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        msg = f"{path}: expected a mapping of config sections, got {type(raw).__name__}"
        raise ValueError(msg)

    return VerifierConfig.model_validate(raw)
