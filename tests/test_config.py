from pathlib import Path

import pytest

from litestar_asset_mix.config import ASSETS_DIR_NAME, AssetMixConfig
from litestar_asset_mix.utils import get_package_path


def test_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = AssetMixConfig()

    assert config.root_dir == tmp_path
    assert config.preset == "vue"
    assert config.assets_dir == ASSETS_DIR_NAME == "assets"
    assert config.template_dir == get_package_path("templates")
    assert config.package_json_path == tmp_path / "package.json"
    assert config.build_config_path == tmp_path / "webpack.mix.js"


def test_config_normalizes_paths(tmp_path: Path) -> None:
    config = AssetMixConfig(root_dir=str(tmp_path), template_dir=str(tmp_path / "templates"))

    assert isinstance(config.root_dir, Path)
    assert isinstance(config.template_dir, Path)
    assert config.template_dir == tmp_path / "templates"


def test_config_custom_file_names(tmp_path: Path) -> None:
    config = AssetMixConfig(root_dir=tmp_path, package_json_name="npm.json", build_config_name="mix.js")

    assert config.package_json_path == tmp_path / "npm.json"
    assert config.build_config_path == tmp_path / "mix.js"
