"""
Declarative extension config (extension.config.yml).
"""

import logging
from typing import Any, Dict, Iterable

import yaml

from ..core.context import ExtensionContext
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class ArgoConfig:
    """Parser for the project's declarative YAML config."""

    @classmethod
    def parse_yaml(
        cls,
        context: ExtensionContext,
        permitted_keys: Iterable[str] = ()
    ) -> Dict[str, Any]:
        """
        Load the declarative config restricted to permitted top-level keys.

        Args:
            context: Extension context
            permitted_keys: Allowed top-level keys; empty allows any key

        Returns:
            Parsed config, or an empty dict if the file is missing or empty

        Raises:
            ConfigurationError: Invalid YAML, a non-mapping document, or
                unpermitted keys
        """
        file_name = context.settings.config_file_name
        path = context.path(file_name)

        if not path.is_file() or path.stat().st_size == 0:
            logger.debug(f"No {file_name} in {context.root}")
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"{file_name} contains invalid YAML: {e}") from e

        if config is None:
            return {}

        if not isinstance(config, dict):
            raise ConfigurationError(f"{file_name} must contain a mapping of config keys")

        config = {str(key): value for key, value in config.items()}
        cls.assert_permitted_keys(config, permitted_keys, file_name)

        logger.debug(f"Loaded {file_name}: {sorted(config)}")
        return config

    @staticmethod
    def assert_permitted_keys(
        config: Dict[str, Any],
        permitted_keys: Iterable[str],
        file_name: str
    ) -> None:
        """Raise if config has top-level keys outside permitted_keys."""
        permitted = list(permitted_keys)
        if not permitted:
            return

        unpermitted = [key for key in config if key not in permitted]
        if unpermitted:
            raise ConfigurationError(
                f"{file_name} contains unpermitted keys: {', '.join(unpermitted)}. "
                f"Allowed keys: {', '.join(permitted)}"
            )
