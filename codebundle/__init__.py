"""
codebundle: concatenate source files of selected languages into one file.
"""

__version__ = "1.0.0"
