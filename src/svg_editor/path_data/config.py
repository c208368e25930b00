"""Configuration management for the path-data engine."""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from svg_editor import PROJECT_DIR

ENVIRONMENTS = ("prd", "dev", "local")


class SVGSourceConfig(BaseModel):
    """Where SVG documents holding path elements are read from."""

    input_dir: Path = Field(default=Path("data/svg"), description="Directory to scan for SVG files")
    svg_glob: str = Field(default="*.svg", description="Glob pattern for SVG files")
    encoding: str = Field(default="utf-8", description="Text encoding of the SVG files")


class PathDataConfig(BaseModel):
    """Path-data engine configuration."""

    # Serializer settings
    number_precision: Optional[int] = Field(
        default=None, description="Decimal places kept when serializing; None keeps exact round-trip digits"
    )

    svg: SVGSourceConfig = Field(default_factory=SVGSourceConfig)

    model_config = {"arbitrary_types_allowed": True}  # Allow Path objects

    @field_validator("number_precision")
    @classmethod
    def validate_number_precision(cls, v):
        """Reject negative precisions."""
        if v is not None and v < 0:
            raise ValueError(f"number_precision must be >= 0, got {v}")
        return v

    @classmethod
    def from_yaml_and_env(
        cls, config_path: str | Path | None = None, env: str = "local", env_dir: str | Path = "config"
    ) -> "PathDataConfig":
        """Load configuration from both YAML and environment files.

        A missing YAML file or environment section falls back to defaults;
        environment variables override whatever the YAML provides.
        """
        if env not in ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {env}")

        # Load environment-specific .env file
        env_file = Path(env_dir) / f".env.{env}"
        if env_file.exists():
            load_dotenv(env_file, override=True)
        else:
            # Fallback to root .env if exists
            load_dotenv(override=True)

        # Load YAML config
        config_path = Path(config_path) if config_path is not None else PROJECT_DIR / "path_data_config.yml"
        env_config: dict = {}
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
                env_config = yaml_config.get(env) or {}

        svg_yaml = env_config.get("svg") or {}
        input_dir = Path(os.getenv("SVG_INPUT_DIR", svg_yaml.get("input_dir", "data/svg")))
        svg_config = SVGSourceConfig(
            input_dir=input_dir if input_dir.is_absolute() else PROJECT_DIR / input_dir,
            svg_glob=os.getenv("SVG_GLOB", svg_yaml.get("svg_glob", "*.svg")),
            encoding=os.getenv("SVG_ENCODING", svg_yaml.get("encoding", "utf-8")),
        )

        precision = os.getenv("PATH_DATA_PRECISION", env_config.get("number_precision"))
        if precision in ("", "none", "None"):
            precision = None

        return cls(
            number_precision=int(precision) if precision is not None else None,
            svg=svg_config,
        )


# Singleton pattern for config
_config: Optional[PathDataConfig] = None


def get_config(env: Optional[str] = None) -> PathDataConfig:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        env = env or os.getenv("ENVIRONMENT", "local")
        _config = PathDataConfig.from_yaml_and_env(env=env)
    return _config


def reset_config():
    """Reset configuration singleton (useful for testing)."""
    global _config
    _config = None


# Rebuild models to resolve forward references (required for Pydantic v2)
SVGSourceConfig.model_rebuild()
PathDataConfig.model_rebuild()
