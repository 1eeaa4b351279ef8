import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath("../../src"))

project = "PySATL Probability"
copyright = f"{datetime.now().year}, Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
author = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx_rtd_theme",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]
exclude_patterns = ["_build"]

# numpydoc sections through napoleon
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_rtype = True
napoleon_preprocess_types = True

autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}
autodoc_typehints = "description"
autodoc_type_aliases = {
    "Seed": "pysatl_probability.types.Seed",
    "Source": "pysatl_probability.random.source.Source",
    "Support": "pysatl_probability.distributions.support.Support",
    "Distribution": "pysatl_probability.distributions.capabilities.Distribution",
    "ParametricFamily": "pysatl_probability.families.parametrizations.ParametricFamily",
}

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
}

html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 3,
}

# Doctest prompts are stripped when copying examples.
copybutton_prompt_text = r">>> |\.\.\. "
copybutton_prompt_is_regexp = True
