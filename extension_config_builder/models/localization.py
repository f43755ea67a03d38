"""
Localization models.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict


class LocaleFile(BaseModel):
    """A validated locale file read from the project's locales folder."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(description="Path relative to the project root")
    locale: str = Field(description="Locale code derived from the filename")
    is_default: bool = Field(default=False, description="Whether this is the default locale")
    content: bytes = Field(default=b"", description="Raw file content")

    def __str__(self) -> str:
        marker = " (default)" if self.is_default else ""
        return f"{self.locale}{marker}: {self.relative_path}"


class LocalizationResult(BaseModel):
    """Localization block merged into the extension config."""

    default_locale: str = Field(description="Locale code of the default locale file")
    files: Dict[str, str] = Field(
        default_factory=dict,
        description="Base64-encoded file content keyed by locale code"
    )

    @property
    def locales(self) -> list:
        """Locale codes in the result, default first."""
        others = sorted(code for code in self.files if code != self.default_locale)
        return [self.default_locale] + others

    def to_config(self) -> Dict[str, Any]:
        """Render as the `localization` config block."""
        return {
            "localization": {
                "default_locale": self.default_locale,
                "files": dict(self.files),
            }
        }
