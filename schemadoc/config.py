"""
Configuration management for schemadoc.

Loads and validates the connection registry from schemadoc.toml files using Pydantic.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILENAME = "schemadoc.toml"


def _toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class ConnectionConfig(BaseModel):
    """Settings for one named database connection."""

    url: str = Field(
        default="postgresql://localhost/app",
        description="PostgreSQL connection URL",
    )
    schemas: list[str] = Field(
        default=["public"],
        description="Schemas to introspect",
    )
    database: Optional[str] = Field(
        default=None,
        description="Database name shown in reports (defaults to dbname from the URL)",
    )


class Config(BaseSettings):
    """Main configuration for schemadoc."""

    model_config = SettingsConfigDict(env_prefix="SCHEMADOC_", env_nested_delimiter="__")

    connections: dict[str, ConnectionConfig] = Field(
        default_factory=lambda: {"default": ConnectionConfig()},
        description="Named connections, reported in the order they are defined",
    )

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Args:
            path: Path to schemadoc.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(**data)

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from schemadoc.toml.

        Searches for schemadoc.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file found
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        # Walk up directory tree
        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start_dir} or parent directories. "
            f"Run 'schemadoc init' to create one."
        )

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write schemadoc.toml
        """
        config_path = Path(path)

        sections = []
        for name, conn in self.connections.items():
            schemas = ", ".join(_toml_string(schema) for schema in conn.schemas)
            lines = [
                f"[connections.{_toml_string(name)}]",
                f"url = {_toml_string(conn.url)}",
                f"schemas = [{schemas}]",
            ]
            if conn.database:
                lines.append(f"database = {_toml_string(conn.database)}")
            sections.append("\n".join(lines))

        toml_content = "# schemadoc configuration\n\n" + "\n\n".join(sections) + "\n"
        config_path.write_text(toml_content)
