"""Sphinx configuration for the DiffKit documentation."""

# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = "DiffKit"
copyright = "2026, DiffKit developers"
author = "DiffKit developers"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.doctest",
    "sphinx_design",
]

autoclass_content = "both"
napoleon_google_docstring = True

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "furo"
html_theme_options = {
    "light_css_variables": {
        "color-brand-primary": "#3b9ab2",
        "color-brand-content": "#3b9ab2",
    },
}
