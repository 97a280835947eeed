"""Litestar-Asset-Mix exception classes."""

__all__ = [
    "AssetMixError",
    "InvalidArgumentError",
    "InvalidPresetError",
    "ManifestDecodeError",
    "SubstitutionError",
    "TemplateReadError",
]


class AssetMixError(Exception):
    """Base exception for Litestar-Asset-Mix related errors."""


class InvalidPresetError(AssetMixError, ValueError):
    """Raised when a preset outside of the supported set is requested."""

    def __init__(self, preset: object, choices: "list[str]") -> None:
        """Initialize the exception.

        Args:
            preset: The rejected preset value.
            choices: The supported preset names.
        """
        super().__init__(f"Invalid preset {preset!r}. Choose one of: {', '.join(choices)}.")
        self.preset = preset


class InvalidArgumentError(AssetMixError, ValueError):
    """Raised when the assets directory name cannot be used."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(f"Invalid directory name {value!r}: {reason}.")
        self.value = value


class TemplateReadError(AssetMixError):
    """Raised when a bundled template file or directory cannot be read."""

    def __init__(self, template_path: str) -> None:
        super().__init__(f"Unable to read template at {template_path!r}.")
        self.template_path = template_path


class ManifestDecodeError(AssetMixError):
    """Raised when the bundled ``package.json`` template is not a valid manifest."""

    def __init__(self, template_path: str, detail: str) -> None:
        super().__init__(f"Invalid package.json template at {template_path!r}: {detail}")
        self.template_path = template_path


class SubstitutionError(AssetMixError):
    """Raised when the build configuration could not be rewritten."""

    def __init__(self, template_path: str, token: str) -> None:
        super().__init__(f"Unable to replace {token!r} in {template_path!r}: token not found.")
        self.template_path = template_path
        self.token = token
