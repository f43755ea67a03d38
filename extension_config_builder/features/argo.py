"""
Renderer config for script-based (Argo) extensions.
"""

import base64
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..core.context import ExtensionContext
from ..errors import ConfigurationError, MissingScriptError

logger = logging.getLogger(__name__)


class Argo:
    """
    Renderer settings for one extension type.

    Args:
        renderer_packages: npm package names providing the renderer, in
            lookup order
    """

    def __init__(self, renderer_packages: Tuple[str, ...]):
        self.renderer_packages = renderer_packages

    def config(
        self,
        context: ExtensionContext,
        include_renderer_version: bool = True
    ) -> Dict[str, Any]:
        """
        Renderer config: the serialized script and optionally the renderer version.

        Raises:
            MissingScriptError: If the compiled script does not exist
        """
        script_path = context.path(context.settings.script_path)
        if not script_path.is_file():
            raise MissingScriptError(
                f"Could not find built extension script {context.settings.script_path}. "
                "Build the extension before packaging it."
            )

        with open(script_path, encoding="utf-8") as f:
            script = f.read().rstrip("\r\n")

        config: Dict[str, Any] = {
            "serialized_script": base64.b64encode(script.encode("utf-8")).decode("ascii"),
        }

        if include_renderer_version:
            version = self.renderer_version(context)
            if version:
                config["renderer_version"] = version

        return config

    def renderer_version(self, context: ExtensionContext) -> Optional[str]:
        """
        Resolve the installed renderer version.

        Prefers the version installed in node_modules, falling back to the
        range declared in the project's package.json.
        """
        declared = self._declared_dependencies(context.root)

        for package in self.renderer_packages:
            installed = context.path(Path("node_modules", *package.split("/"), "package.json"))
            if installed.is_file():
                version = self._read_package_json(installed).get("version")
                if version:
                    return version
            if package in declared:
                return str(declared[package])

        logger.warning(
            f"No renderer package found (looked for {', '.join(self.renderer_packages)})"
        )
        return None

    def _declared_dependencies(self, root: Path) -> Dict[str, Any]:
        package_json = root / "package.json"
        if not package_json.is_file():
            return {}
        data = self._read_package_json(package_json)
        dependencies = {}
        for section in ("devDependencies", "dependencies"):
            dependencies.update(data.get(section) or {})
        return dependencies

    @staticmethod
    def _read_package_json(path: Path) -> Dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a JSON object")
        return data


checkout_ui_extension_argo = Argo(
    renderer_packages=(
        "@shopify/checkout-ui-extensions",
        "@shopify/checkout-ui-extensions-react",
    )
)
