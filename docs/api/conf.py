"""
Sphinx configuration for the Magic Number API documentation.
"""

import os
import sys

# Make the src/ layout importable for autodoc
sys.path.insert(0, os.path.abspath('../../src'))

from magic_number import __version__  # noqa: E402

# Project information
project = 'Magic Number'
copyright = '2026, Magic Number Contributors'
author = 'Magic Number Contributors'
release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx_autodoc_typehints',
]

source_suffix = '.rst'
master_doc = 'index'
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'sphinx_rtd_theme'

# Autodoc settings
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'show-inheritance': True,
}

# Napoleon settings (Google-style docstrings)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_attr_annotations = True

# Type hints settings
typehints_fully_qualified = False
always_document_param_types = True
