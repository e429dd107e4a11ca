"""
Smoke tests to verify basic infrastructure setup.
Run these after fresh environment setup to confirm everything works.
"""

import sys
import importlib
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parent.parent


def test_python_version():
    """Test Python version meets requirements."""
    assert sys.version_info >= (3, 9), f"Python 3.9+ required, got {sys.version}"


def test_package_imports():
    """Test that configured packages can be imported."""
    packages = [
        "numpy",
        "pytest",
        "psutil",
        "lifegrid",
        "lifegrid.core.grid",
        "lifegrid.core.world",
        "lifegrid.patterns",
        "lifegrid.formats",
    ]

    failed_imports = []
    for package in packages:
        try:
            importlib.import_module(package)
        except ImportError as e:
            failed_imports.append(f"{package}: {e}")

    if failed_imports:
        pytest.fail(f"Failed to import packages: {failed_imports}")


def test_public_api():
    """Test that the top-level package exports its public names."""
    import lifegrid

    for name in lifegrid.__all__:
        assert hasattr(lifegrid, name), f"lifegrid.{name} missing"
    assert lifegrid.__version__


def test_tool_config_files():
    """Test that tool configuration files exist."""
    configs = [
        "pyproject.toml",
        "README.md",
    ]

    missing_configs = [config for config in configs if not (ROOT / config).exists()]

    if missing_configs:
        pytest.fail(f"Missing configuration files: {missing_configs}")
