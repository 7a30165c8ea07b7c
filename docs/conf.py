"""Sphinx configuration for wsl-discovery documentation."""

from __future__ import annotations

from wsl_discovery import __version__

project = "wsl-discovery"
release = __version__
version = ".".join(release.split(".")[:2])
copyright = "2026, wsl-discovery developers"  # noqa: A001

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_autodoc_typehints",
]
autodoc_member_order = "bysource"
typehints_defaults = "comma"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "platformdirs": ("https://platformdirs.readthedocs.io/en/latest", None),
}

exclude_patterns = ["_build"]
html_theme = "furo"
html_title = project
html_theme_options = {"navigation_with_keys": True}
