# Sphinx configuration for the uirecorder API reference.
import os
import sys
from datetime import date

sys.path.insert(0, os.path.abspath("../src"))

import uirecorder

# -- Project information -----------------------------------------------------
project = "uirecorder"
copyright = f"{date.today().year}, uirecorder contributors"
author = "uirecorder contributors"
release = uirecorder.__version__
version = ".".join(release.split(".")[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_rtd_theme",
]

exclude_patterns = ["_build"]

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_theme_options = {"navigation_depth": 3}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
