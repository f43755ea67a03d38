"""
Per-invocation context passed to specification handlers.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..config import Settings


@dataclass(frozen=True)
class ExtensionContext:
    """Project root and settings for one CLI invocation."""

    root: Path
    settings: Settings = field(default_factory=Settings)

    @classmethod
    def for_project(cls, root: Union[str, Path], settings: Settings = None) -> "ExtensionContext":
        """
        Build a context for a project directory.

        Args:
            root: Extension project root
            settings: Optional settings, loaded from the environment if omitted

        Returns:
            ExtensionContext with an absolute root
        """
        return cls(
            root=Path(root).resolve(),
            settings=settings if settings is not None else Settings()
        )

    def path(self, relative: Union[str, Path]) -> Path:
        """Resolve a project-relative path against the root."""
        return self.root / relative

    @property
    def non_locale_dirs(self) -> List[str]:
        """Top-level directories holding build inputs and outputs, not locales."""
        dirs = list(self.settings.l10n_ignored_dirs)
        script_parts = Path(self.settings.script_path).parts
        if len(script_parts) > 1 and script_parts[0] not in dirs:
            dirs.append(script_parts[0])
        return dirs
