"""
bioproj
=======

Tools for setting up and maintaining bioinformatics research projects.
"""
__version__ = "0.1.0"
