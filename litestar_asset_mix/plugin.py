from typing import TYPE_CHECKING

from litestar.plugins import CLIPlugin

from litestar_asset_mix.config import AssetMixConfig

if TYPE_CHECKING:
    from click import Group


class AssetMixPlugin(CLIPlugin):
    """Asset scaffolding plugin.

    Registers the ``asset-mix`` command group with the Litestar CLI.

    Example::

        from litestar import Litestar
        from litestar_asset_mix import AssetMixConfig, AssetMixPlugin

        app = Litestar(plugins=[AssetMixPlugin(config=AssetMixConfig(assets_dir="resources"))])
    """

    __slots__ = ("_config",)

    def __init__(self, config: "AssetMixConfig | None" = None) -> None:
        """Initialize ``AssetMix``.

        Args:
            config: configuration to use for generating scaffolding.  The default configuration will be used if it is not provided.
        """
        if config is None:
            config = AssetMixConfig()
        self._config = config

    @property
    def config(self) -> AssetMixConfig:
        return self._config

    def on_cli_init(self, cli: "Group") -> None:
        """Register CLI commands.

        Args:
            cli: The Click command group to add commands to.
        """
        from litestar_asset_mix.cli import asset_mix_group

        cli.add_command(asset_mix_group)
