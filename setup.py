#!/usr/bin/env python
from setuptools import setup, find_packages

setup(name = "bioproj",
      version = "0.1.0",
      author = "Science for Life Laboratory",
      author_email = "genomics_support@scilifelab.se",
      description = "Tools for organizing bioinformatics research projects",
      license = "MIT",
      scripts = ['scripts/pm'],
      python_requires = ">=3.8",
      install_requires = [
        "cement >= 3.0",
        "logbook >= 1.5",
        "mako >= 1.1",
        "pyyaml >= 5.1",
        ],
      extras_require = {
        "test": ["pytest"],
        },
      packages=find_packages(exclude=['tests', 'tests.*']),
      package_data = {'bioproj':[
          'templates/tpl/*',
          ]}
      )
