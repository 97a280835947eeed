from pathlib import Path

import pytest

from litestar_asset_mix.scaffolding.templates import (
    PRESET_TEMPLATES,
    PresetTemplate,
    PresetType,
    get_available_presets,
    get_preset,
)


def test_available_presets() -> None:
    presets = get_available_presets()

    assert [preset.type for preset in presets] == [PresetType.VUE, PresetType.REACT, PresetType.BOOTSTRAP]
    assert all(isinstance(preset, PresetTemplate) for preset in presets)


@pytest.mark.parametrize("value", ["vue", PresetType.VUE])
def test_get_preset(value: "PresetType | str") -> None:
    preset = get_preset(value)

    assert preset is not None
    assert preset.type is PresetType.VUE
    assert preset.package_json == "vue/package.json"
    assert preset.build_config == "vue/webpack.mix.js"
    assert preset.assets_dir == "vue/assets"


def test_get_preset_unknown() -> None:
    assert get_preset("angular") is None


def test_preset_dependency_tables() -> None:
    assert PRESET_TEMPLATES[PresetType.VUE].dev_dependencies == {
        "resolve-url-loader": "^2.3.1",
        "sass": "^1.20.1",
        "sass-loader": "^8.0.0",
        "vue": "^2.5.18",
        "vue-template-compiler": "^2.6.10",
    }
    assert PRESET_TEMPLATES[PresetType.BOOTSTRAP].dev_dependencies == {
        "bootstrap": "^4.0.0",
        "jquery": "^3.2",
        "popper.js": "^1.12",
    }
    assert PRESET_TEMPLATES[PresetType.REACT].dev_dependencies is None


@pytest.mark.parametrize("preset", get_available_presets(), ids=lambda preset: preset.type.value)
def test_bundled_templates_exist(bundled_template_dir: Path, preset: PresetTemplate) -> None:
    assert (bundled_template_dir / preset.package_json).is_file()
    assert (bundled_template_dir / preset.build_config).is_file()
    assert (bundled_template_dir / preset.assets_dir / "js" / "app.js").is_file()
    assert (bundled_template_dir / preset.assets_dir / "sass" / "app.scss").is_file()


@pytest.mark.parametrize("preset", get_available_presets(), ids=lambda preset: preset.type.value)
def test_build_config_templates_reference_default_directory(bundled_template_dir: Path, preset: PresetTemplate) -> None:
    content = (bundled_template_dir / preset.build_config).read_text()

    assert "mix.setPublicPath('./webroot')" in content
    assert "'assets/js/app.js'" in content
    assert "'assets/sass/app.scss'" in content
