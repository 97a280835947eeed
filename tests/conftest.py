from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from litestar_asset_mix.config import AssetMixConfig
from litestar_asset_mix.scaffolding import ScaffoldGenerator
from litestar_asset_mix.utils import get_package_path

here = Path(__file__).parent


@pytest.fixture
def bundled_template_dir() -> Path:
    return get_package_path("templates")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def custom_template_dir(tmp_path: Path, bundled_template_dir: Path) -> Path:
    """A writable copy of the bundled templates, for tests that break them on purpose."""
    template_dir = tmp_path / "templates"
    shutil.copytree(bundled_template_dir, template_dir)
    return template_dir


@pytest.fixture
def asset_mix_config(project_root: Path) -> AssetMixConfig:
    return AssetMixConfig(root_dir=project_root)


@pytest.fixture
def generator(asset_mix_config: AssetMixConfig) -> ScaffoldGenerator:
    return ScaffoldGenerator(asset_mix_config)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
