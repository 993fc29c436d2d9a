"""
project layout library

Provides functionality for project folder structure

Project folders should adhere to a common format. Currently
the format is

project
  README.md
  analysis
    0001_first_analysis.Rmd
    0002_second_analysis.ipynb
    ...
  scripts
  lib
    samples.tsv
  data
  Snakefile
  Singularity

analysis holds the chronologically numbered analysis documents,
scripts executable utilities, lib read-only reference data and
static definitions (among them the sample-to-path mapping), and data
everything that is generated. The Snakefile is the workflow
definition and Singularity the software definition. Hidden entries
(.git, .gitignore, .snakemake, ...) are allowed alongside.
"""
import os

ANALYSIS_DIR = "analysis"
SCRIPTS_DIR = "scripts"
LIB_DIR = "lib"
DATA_DIR = "data"
README_FILE = "README.md"
WORKFLOW_FILE = "Snakefile"
CONTAINER_FILE = "Singularity"
SAMPLES_FILE = os.path.join(LIB_DIR, "samples.tsv")
GITIGNORE_FILE = ".gitignore"

PROJECT_DIRS = [ANALYSIS_DIR, SCRIPTS_DIR, LIB_DIR, DATA_DIR]
PROJECT_FILES = [README_FILE, WORKFLOW_FILE, CONTAINER_FILE, SAMPLES_FILE]

class ProjectLayout(object):
    """Prescribed layout of a project folder.

    :param path: project folder
    """
    def __init__(self, path):
        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)

    def __repr__(self):
        return "<ProjectLayout {}>".format(self.path)

    def _abs(self, entry):
        return os.path.join(self.path, entry)

    @property
    def analysis_dir(self):
        return self._abs(ANALYSIS_DIR)

    @property
    def scripts_dir(self):
        return self._abs(SCRIPTS_DIR)

    @property
    def lib_dir(self):
        return self._abs(LIB_DIR)

    @property
    def data_dir(self):
        return self._abs(DATA_DIR)

    @property
    def readme_file(self):
        return self._abs(README_FILE)

    @property
    def workflow_file(self):
        return self._abs(WORKFLOW_FILE)

    @property
    def container_file(self):
        return self._abs(CONTAINER_FILE)

    @property
    def samples_file(self):
        return self._abs(SAMPLES_FILE)

    def dirs(self):
        """Absolute paths of prescribed directories"""
        return [self._abs(x) for x in PROJECT_DIRS]

    def files(self):
        """Absolute paths of prescribed files"""
        return [self._abs(x) for x in PROJECT_FILES]

    def exists(self):
        return os.path.isdir(self.path)

    def missing(self):
        """Prescribed entries that are missing or of the wrong kind.

        :returns: list of entries relative to project folder
        """
        out = [x for x in PROJECT_DIRS if not os.path.isdir(self._abs(x))]
        out += [x for x in PROJECT_FILES if not os.path.isfile(self._abs(x))]
        return out

    def unexpected(self):
        """Top-level entries that are not part of the layout.

        :returns: sorted list of entry names
        """
        if not self.exists():
            return []
        allowed = set(PROJECT_DIRS + [x for x in PROJECT_FILES if os.sep not in x])
        return sorted(x for x in os.listdir(self.path) if not x.startswith(".") and x not in allowed)
