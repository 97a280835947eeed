"""Project scaffolding module for litestar-asset-mix.

This module provides the `litestar asset-mix generate` command with
preset-specific file generation.

Supported presets:
- Vue
- React
- Bootstrap
"""

from litestar_asset_mix.scaffolding.generator import ScaffoldGenerator
from litestar_asset_mix.scaffolding.templates import PresetTemplate, PresetType, get_available_presets, get_preset

__all__ = ["PresetTemplate", "PresetType", "ScaffoldGenerator", "get_available_presets", "get_preset"]
