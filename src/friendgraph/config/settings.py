"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``FRIENDGRAPH_*`` prefix
  3. TOML file: ``friendgraph.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from friendgraph.config.discovery import find_config, read_config
from friendgraph.config.models import NetworkConfig, RecommendConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``friendgraph.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class FriendGraphSettings(BaseSettings):
    """Settings for the friendgraph CLI, frozen after construction.

    Attributes:
        project_root: Directory relative paths resolve against (parent of
            ``friendgraph.toml``, or CWD if no config found).
        config_path: The TOML file in use, if any.
        network_file: Explicit ``--file`` override for the working network.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FRIENDGRAPH_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    network_file: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    recommend: RecommendConfig = Field(default_factory=RecommendConfig)

    @property
    def working_file(self) -> Path:
        """The network file one-shot commands read from and commit to."""
        path = self.network_file or Path(self.network.file)
        if path.is_absolute():
            return path
        return self.project_root / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> FriendGraphSettings:
        """Construct settings from a CLI invocation.

        Discovers ``friendgraph.toml`` via walk-up (or explicit
        *config_path*), resolves *project_root* from the config file's
        parent directory, and merges CLI flags as highest-priority
        overrides. Flags passed as None are dropped so lower layers apply.
        """
        toml_path = find_config(project_root, explicit=config_path)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **flags,
            )
        finally:
            _tls.toml_path = None
