"""Litestar-Asset-Mix: front-end asset scaffolding for Litestar projects.

This package generates a ``package.json``, a Laravel Mix ``webpack.mix.js``
and a directory of starter JS/Sass files from a preset (vue, react, bootstrap).

Basic usage:
    from litestar import Litestar
    from litestar_asset_mix import AssetMixPlugin

    app = Litestar(plugins=[AssetMixPlugin()])

Then run ``litestar asset-mix generate vue --dir assets``.
"""

from litestar_asset_mix.config import AssetMixConfig
from litestar_asset_mix.plugin import AssetMixPlugin
from litestar_asset_mix.scaffolding import ScaffoldGenerator

__all__ = ("AssetMixConfig", "AssetMixPlugin", "ScaffoldGenerator")
