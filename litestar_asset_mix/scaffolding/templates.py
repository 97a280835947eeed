"""Preset template definitions for scaffolding.

This module defines the available presets and the files and dependencies each
one contributes.
"""

from dataclasses import dataclass
from enum import Enum


class PresetType(str, Enum):
    """Supported scaffolding presets."""

    VUE = "vue"
    REACT = "react"
    BOOTSTRAP = "bootstrap"


@dataclass(frozen=True)
class PresetTemplate:
    """Configuration for a scaffolding preset.

    Template locations are relative to the template directory.

    Attributes:
        name: Display name for the preset
        type: Preset type enum
        description: Brief description shown in help output
        dev_dependencies: NPM dev dependencies merged over the ``package.json`` template,
            or ``None`` when the preset does not define any
        package_json: Location of the ``package.json`` template
        build_config: Location of the ``webpack.mix.js`` template
        assets_dir: Location of the starter assets tree
    """

    name: str
    type: PresetType
    description: str
    dev_dependencies: "dict[str, str] | None"
    package_json: str
    build_config: str
    assets_dir: str


def _preset(
    preset_type: PresetType, name: str, description: str, dev_dependencies: "dict[str, str] | None"
) -> PresetTemplate:
    return PresetTemplate(
        name=name,
        type=preset_type,
        description=description,
        dev_dependencies=dev_dependencies,
        package_json=f"{preset_type.value}/package.json",
        build_config=f"{preset_type.value}/webpack.mix.js",
        assets_dir=f"{preset_type.value}/assets",
    )


PRESET_TEMPLATES: dict[PresetType, PresetTemplate] = {
    PresetType.VUE: _preset(
        PresetType.VUE,
        name="Vue",
        description="Vue 2 single file components compiled with Laravel Mix and Sass",
        dev_dependencies={
            "resolve-url-loader": "^2.3.1",
            "sass": "^1.20.1",
            "sass-loader": "^8.0.0",
            "vue": "^2.5.18",
            "vue-template-compiler": "^2.6.10",
        },
    ),
    PresetType.REACT: _preset(
        PresetType.REACT,
        name="React",
        description="React components compiled with Laravel Mix and Sass",
        # No extra table is defined for React; the template's own devDependencies are used as-is.
        dev_dependencies=None,
    ),
    PresetType.BOOTSTRAP: _preset(
        PresetType.BOOTSTRAP,
        name="Bootstrap",
        description="Bootstrap 4 with jQuery and Popper.js",
        dev_dependencies={
            "bootstrap": "^4.0.0",
            "jquery": "^3.2",
            "popper.js": "^1.12",
        },
    ),
}


def get_available_presets() -> list[PresetTemplate]:
    """Get all available presets.

    Returns:
        List of available PresetTemplate instances.
    """
    return list(PRESET_TEMPLATES.values())


def get_preset(preset_type: "PresetType | str") -> "PresetTemplate | None":
    """Get a specific preset.

    Args:
        preset_type: The preset type (enum or string).

    Returns:
        The PresetTemplate if found, None otherwise.
    """
    if isinstance(preset_type, PresetType):
        return PRESET_TEMPLATES.get(preset_type)
    try:
        return PRESET_TEMPLATES.get(PresetType(preset_type))
    except ValueError:
        return None
