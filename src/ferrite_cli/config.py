import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import LinterConfig

logger = logging.getLogger(__name__)

CONFIG_FILES = (".ferrite-lint.toml", "pyproject.toml")


def find_config(start: Path | None = None) -> Path | None:
    """First config file found in `start` (default: the working directory)"""
    directory = start or Path.cwd()
    for name in CONFIG_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


class LintConfig:
    """Handles loading and validation of .ferrite-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.settings = LinterConfig()

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    @property
    def select(self) -> list[str]:
        return self.settings.select

    @property
    def ignore(self) -> list[str]:
        return self.settings.ignore

    @property
    def show_advisory(self) -> bool:
        return self.settings.show_advisory

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("could not read %s, using defaults: %s", path, e)
            return

        lint_data = data.get("tool", {}).get("ferrite-lint")
        if lint_data is None:
            if path.name == "pyproject.toml":
                return
            # a dedicated config file may also use top-level keys
            lint_data = data

        try:
            self.settings = LinterConfig.model_validate(lint_data)
        except ValidationError as e:
            logger.warning("invalid configuration in %s, using defaults: %s", path, e)

    def apply_to_registry(
        self,
        registry: Any,
        select: list[str] | None = None,
        ignore: list[str] | None = None,
    ) -> list[Any]:
        """Return list of enabled rules based on this config.

        `select` replaces the configured selection; `ignore` adds to it.
        """
        return registry.get_enabled_rules(
            select=select or self.select,
            ignore=[*self.ignore, *(ignore or [])],
        )
