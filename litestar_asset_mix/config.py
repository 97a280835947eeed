"""Asset scaffolding configuration."""

from dataclasses import dataclass, field
from pathlib import Path

from litestar_asset_mix.utils import get_package_path

__all__ = ("ASSETS_DIR_NAME", "AssetMixConfig")

ASSETS_DIR_NAME = "assets"
"""Default name of the directory holding the generated JS/Sass sources."""


@dataclass
class AssetMixConfig:
    """Configuration for generating front-end assets scaffolding.

    Attributes:
        root_dir: The root directory of the project. Defaults to current working directory.
        preset: Preset used when none is given on the command line.
        assets_dir: Directory name, relative to ``root_dir``, receiving the starter assets.
        package_json_name: File name of the generated package manifest.
        build_config_name: File name of the generated Laravel Mix configuration.
        template_dir: Directory containing one template folder per preset.
    """

    root_dir: "str | Path" = field(default_factory=Path.cwd)
    preset: str = "vue"
    assets_dir: str = ASSETS_DIR_NAME
    package_json_name: str = "package.json"
    build_config_name: str = "webpack.mix.js"
    template_dir: "str | Path" = field(default_factory=lambda: get_package_path("templates"))

    def __post_init__(self) -> None:
        """Normalize path types to Path objects."""
        if isinstance(self.root_dir, str):
            object.__setattr__(self, "root_dir", Path(self.root_dir))
        if isinstance(self.template_dir, str):
            object.__setattr__(self, "template_dir", Path(self.template_dir))

    @property
    def package_json_path(self) -> Path:
        return Path(self.root_dir) / self.package_json_name

    @property
    def build_config_path(self) -> Path:
        return Path(self.root_dir) / self.build_config_name
