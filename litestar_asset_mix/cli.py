from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from click import Choice, Context, argument, group, option
from click import Path as ClickPath
from litestar.cli._utils import LitestarGroup  # pyright: ignore[reportPrivateImportUsage]

from litestar_asset_mix.scaffolding.templates import get_available_presets

if TYPE_CHECKING:
    from litestar_asset_mix.config import AssetMixConfig

PRESET_CHOICES = [preset.type.value for preset in get_available_presets()]


def _presets_epilog() -> str:
    """Describe each preset for the ``generate`` help output.

    Returns:
        A help epilog, kept unwrapped by click.
    """
    width = max(len(choice) for choice in PRESET_CHOICES)
    lines = [f"  {preset.type.value.ljust(width)}  {preset.description}" for preset in get_available_presets()]
    return "\b\nPresets:\n" + "\n".join(lines)


@group(cls=LitestarGroup, name="asset-mix")
def asset_mix_group() -> None:
    """Manage front-end asset scaffolding."""


def _resolve_config(ctx: "Context") -> "AssetMixConfig":
    """Return the plugin configuration of the loaded app, or the defaults outside of an app.

    Returns:
        The configuration to generate with.
    """
    from litestar_asset_mix.config import AssetMixConfig
    from litestar_asset_mix.plugin import AssetMixPlugin

    if ctx.obj is None:
        return AssetMixConfig()
    if callable(ctx.obj):
        ctx.obj = ctx.obj()
    return ctx.obj.app.plugins.get(AssetMixPlugin).config


@asset_mix_group.command(
    name="generate",
    help="Auto generate configuration files, assets directory",
    epilog=_presets_epilog(),
)
@argument("preset", type=Choice(PRESET_CHOICES), required=False, default=None)
@option(
    "-d",
    "--dir",
    "dir_name",
    type=str,
    help="Directory name to create. Defaults to 'assets'.",
    default=None,
    required=False,
)
@option(
    "--root-path",
    type=ClickPath(dir_okay=True, file_okay=False, path_type=Path),
    help="The project root to generate files in. Defaults to the current working directory.",
    default=None,
    required=False,
)
def asset_mix_generate(
    ctx: "Context",
    preset: "Optional[str]",
    dir_name: "Optional[str]",
    root_path: "Optional[Path]",
) -> None:
    """Generate package.json, webpack.mix.js and the assets directory."""
    from litestar.cli._utils import LitestarCLIException, console  # pyright: ignore[reportPrivateImportUsage]

    from litestar_asset_mix.exceptions import AssetMixError
    from litestar_asset_mix.scaffolding import ScaffoldGenerator

    config = _resolve_config(ctx)
    if root_path is not None:
        config = replace(config, root_dir=root_path)

    preset = preset or config.preset
    dir_name = config.assets_dir if dir_name is None else dir_name

    console.rule(f"[yellow]Generating {preset} assets scaffolding[/]", align="left")
    try:
        ScaffoldGenerator(config).generate(preset, dir_name)
    except AssetMixError as e:
        raise LitestarCLIException(str(e)) from e
