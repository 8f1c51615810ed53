# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = 'sCurved'
copyright = '2026'
author = 'sCurved developers'
release = '0.0.0'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = [
    'numpydoc',
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.intersphinx',
    'sphinx_copybutton',
]
exclude_patterns = []
html_static_path = ['.']

# Define the global role :python:``.
rst_prolog = """
.. role:: python(code)
    :language: python
"""

pygments_style = 'stata-light'
autodoc_typehints = 'none'
autodoc_default_options = {
    'inherited-members': None,
    'show-inheritance': None,
}
numpydoc_show_class_members = False
intersphinx_mapping = {
    'numpy': ('https://numpy.org/doc/2.1', None),
    'python': ('https://docs.python.org/3', None),
}



# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = 'sphinx_book_theme'

