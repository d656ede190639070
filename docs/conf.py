# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from importlib import metadata

copyright = "2026, name_tower developers"  # pylint:disable=redefined-builtin
author = "name_tower developers"
release = metadata.version("name_tower")
project = f"name_tower {release}"

extensions = ["sphinx_rtd_theme", "sphinx.ext.napoleon", "autoapi.extension"]

exclude_patterns = ["_build"]

html_theme = "sphinx_rtd_theme"

autoapi_dirs = ["../name_tower"]
autoapi_python_use_implicit_namespaces = True
