"""Project scaffolding generator.

This module materializes a preset into a project: the ``package.json``
manifest, the ``webpack.mix.js`` build configuration and the starter assets
directory.
"""

import re
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgspec
from litestar.exceptions import SerializationException
from litestar.serialization import decode_json, encode_json
from rich.markup import escape

from litestar_asset_mix.config import ASSETS_DIR_NAME, AssetMixConfig
from litestar_asset_mix.exceptions import (
    InvalidArgumentError,
    InvalidPresetError,
    ManifestDecodeError,
    SubstitutionError,
    TemplateReadError,
)
from litestar_asset_mix.scaffolding.templates import PresetType, get_preset
from litestar_asset_mix.utils import (
    copy_tree,
    log_info,
    log_success,
    log_warn,
    logger,
    read_text_file,
    write_text_file,
)

if TYPE_CHECKING:
    from litestar_asset_mix.scaffolding.templates import PresetTemplate

DEV_DEPENDENCIES_KEY = "devDependencies"

_DIRECTORY_TOKEN = re.compile(rf"\b{re.escape(ASSETS_DIR_NAME)}\b")


def merge_dev_dependencies(
    dev_dependencies: "Mapping[str, Any]", preset_dependencies: "Mapping[str, str] | None"
) -> dict[str, Any]:
    """Merge preset dependencies over the template's ``devDependencies``.

    Preset entries win over identically named template entries and the result
    is sorted by package name.

    Args:
        dev_dependencies: The ``devDependencies`` from the template.
        preset_dependencies: The preset's own dependency table, if any.

    Returns:
        The merged and sorted dependency mapping.
    """
    merged = {**dev_dependencies, **(preset_dependencies or {})}
    return {name: merged[name] for name in sorted(merged)}


def replace_directory_token(content: str, dir_name: str) -> "tuple[str, int]":
    """Replace every whole-word ``assets`` token in ``content`` with ``dir_name``.

    ``dir_name`` is inserted literally, so backslashes are never treated as
    group references.

    Returns:
        The rewritten content and the number of replacements.
    """
    return _DIRECTORY_TOKEN.subn(lambda _: dir_name, content)


def validate_dir_name(dir_name: object) -> str:
    """Check that ``dir_name`` can be used as a directory inside the project root.

    Args:
        dir_name: The user supplied directory name.

    Raises:
        InvalidArgumentError: If the name is not a non-empty relative path.

    Returns:
        The validated directory name.
    """
    if not isinstance(dir_name, str):
        raise InvalidArgumentError(dir_name, "expected a string")
    if not dir_name.strip():
        raise InvalidArgumentError(dir_name, "must not be empty")
    path = Path(dir_name)
    if not path.parts:
        raise InvalidArgumentError(dir_name, "must name a directory")
    if path.is_absolute():
        raise InvalidArgumentError(dir_name, "must be relative to the project root")
    if "\x00" in dir_name:
        raise InvalidArgumentError(dir_name, "must not contain NUL bytes")
    if ".." in path.parts:
        raise InvalidArgumentError(dir_name, "must not leave the project root")
    return dir_name


def resolve_preset(preset: "PresetType | str") -> "PresetTemplate":
    """Look up the template for ``preset``.

    Raises:
        InvalidPresetError: If the preset is not supported.

    Returns:
        The matching preset template.
    """
    template = get_preset(preset)
    if template is None:
        raise InvalidPresetError(preset, [member.value for member in PresetType])
    return template


class ScaffoldGenerator:
    """Write preset scaffolding into a project root.

    Each step writes its output and reports success before the next one runs.
    A failing step aborts the remaining ones without undoing earlier writes.
    """

    __slots__ = ("_config",)

    def __init__(self, config: "AssetMixConfig | None" = None) -> None:
        """Initialize the generator.

        Args:
            config: Scaffolding configuration. The default configuration will be used if it is not provided.
        """
        self._config = config or AssetMixConfig()

    @property
    def config(self) -> AssetMixConfig:
        return self._config

    def generate(self, preset: "PresetType | str", dir_name: str) -> list[Path]:
        """Generate ``package.json``, ``webpack.mix.js`` and the assets directory.

        Args:
            preset: The preset to materialize.
            dir_name: Name of the assets directory, relative to the project root.

        Returns:
            The written manifest, build configuration and assets directory paths.
        """
        template = resolve_preset(preset)
        dir_name = validate_dir_name(dir_name)
        self._assets_target(dir_name)
        logger.debug("Generating %s preset into %s", template.type.value, self._config.root_dir)

        return [
            self.write_package_json(template),
            self.write_build_config(template, dir_name),
            self.copy_assets_directory(template, dir_name),
        ]

    def write_package_json(self, template: "PresetTemplate") -> Path:
        """Merge the preset dependencies into the ``package.json`` template and write it.

        Args:
            template: The resolved preset.

        Returns:
            Path of the written manifest.
        """
        source = self._template_path(template.package_json)
        target = self._config.package_json_path

        manifest = self._load_manifest(source)
        if template.dev_dependencies is None:
            log_warn(
                f"No extra dev dependencies are defined for the {template.name} preset, "
                f"using the template's {DEV_DEPENDENCIES_KEY} as-is."
            )
        manifest[DEV_DEPENDENCIES_KEY] = merge_dev_dependencies(
            manifest.get(DEV_DEPENDENCIES_KEY, {}), template.dev_dependencies
        )

        write_text_file(target, msgspec.json.format(encode_json(manifest), indent=2).decode("utf-8") + "\n")
        log_success(f"'{escape(self._config.package_json_name)}' file created successfully.")
        return target

    def write_build_config(self, template: "PresetTemplate", dir_name: str) -> Path:
        """Copy the ``webpack.mix.js`` template, pointing it at ``dir_name``.

        Args:
            template: The resolved preset.
            dir_name: Name of the assets directory.

        Raises:
            SubstitutionError: If the template has no directory token to rewrite.

        Returns:
            Path of the written build configuration.
        """
        source = self._template_path(template.build_config)
        target = self._config.build_config_path

        content, replacements = replace_directory_token(self._read_template(source), dir_name)
        if replacements == 0:
            raise SubstitutionError(str(source), ASSETS_DIR_NAME)

        write_text_file(target, content)
        log_success(f"'{escape(self._config.build_config_name)}' file created successfully.")
        return target

    def copy_assets_directory(self, template: "PresetTemplate", dir_name: str) -> Path:
        """Copy the preset's starter assets into ``<root>/<dir_name>``.

        Files already present in the destination are kept unless the preset
        ships a file with the same relative path.

        Args:
            template: The resolved preset.
            dir_name: Name of the assets directory.

        Raises:
            TemplateReadError: If the bundled assets tree is missing.
            InvalidArgumentError: If the destination exists and is not a directory.

        Returns:
            Path of the assets directory.
        """
        source = self._template_path(template.assets_dir)
        target = self._assets_target(dir_name)

        if not source.is_dir():
            raise TemplateReadError(str(source))
        if target.is_dir():
            log_info(f"'{escape(dir_name)}' already exists, copying starter files over it.")

        target.mkdir(parents=True, exist_ok=True)
        copied = copy_tree(source, target)
        logger.debug("Copied %d files into %s", len(copied), target)
        log_success(f"'{escape(dir_name)}' directory created successfully.")
        return target

    def _template_path(self, relative: str) -> Path:
        return Path(self._config.template_dir) / relative

    def _assets_target(self, dir_name: str) -> Path:
        """Resolve the assets directory, refusing paths taken by something other than a directory.

        Raises:
            InvalidArgumentError: If the path or one of its parents exists and is not a directory.

        Returns:
            Path of the assets directory.
        """
        target = Path(self._config.root_dir)
        for part in Path(dir_name).parts:
            target = target / part
            if target.exists() and not target.is_dir():
                raise InvalidArgumentError(dir_name, f"{part!r} exists and is not a directory")
        return target

    @staticmethod
    def _read_template(path: Path) -> str:
        try:
            return read_text_file(path)
        except OSError as e:
            raise TemplateReadError(str(path)) from e

    def _load_manifest(self, path: Path) -> dict[str, Any]:
        try:
            manifest = decode_json(self._read_template(path))
        except SerializationException as e:
            raise ManifestDecodeError(str(path), str(e)) from e
        if not isinstance(manifest, dict):
            raise ManifestDecodeError(str(path), "expected a JSON object")
        if not isinstance(manifest.get(DEV_DEPENDENCIES_KEY, {}), dict):
            raise ManifestDecodeError(str(path), f"{DEV_DEPENDENCIES_KEY!r} must be a JSON object")
        return manifest
