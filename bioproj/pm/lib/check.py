"""
Project check library

Compares a project folder with the conventions and reports the
deviations. Nothing is changed on disk.
"""
import os
from collections import namedtuple

from bioproj.log import minimal_logger
from bioproj.utils.misc import filtered_walk
from bioproj.pm.lib.layout import ProjectLayout, ANALYSIS_DIR, DATA_DIR
from bioproj.pm.lib.naming import list_analyses, duplicate_numbers, parse_analysis_name, DIGITS
from bioproj.pm.lib.samples import read_sample_map, missing_data, SampleMapError

LOG = minimal_logger(__name__)

Problem = namedtuple("Problem", ["kind", "path", "message"])

def _stray_analyses(layout, digits):
    """Analysis documents outside the analysis folder"""
    def analysis_filter(f):
        return parse_analysis_name(f, digits) is not None
    exclude = [ANALYSIS_DIR, DATA_DIR, ".git", ".snakemake", ".ipynb_checkpoints"]
    return filtered_walk(layout.path, analysis_filter, exclude_dirs=exclude)

def check_project(path, digits=DIGITS):
    """Check a project folder.

    :param path: project folder
    :param digits: number of digits in analysis sequence numbers

    :returns: list of Problem
    """
    layout = ProjectLayout(path)
    if not layout.exists():
        return [Problem("missing", layout.path, "no such project folder")]
    LOG.debug("checking project {}".format(layout.path))
    problems = []
    for x in layout.missing():
        problems.append(Problem("missing", x, "prescribed entry is missing"))
    for x in layout.unexpected():
        problems.append(Problem("unexpected", x, "not part of the project layout"))

    (names, other) = list_analyses(layout.analysis_dir, digits)
    for x in other:
        problems.append(Problem("naming", os.path.join(ANALYSIS_DIR, x),
                                "not named as NNNN_description.<ext> with a {}-digit number and a known format".format(digits)))
    for number, fnames in sorted(duplicate_numbers(names).items()):
        problems.append(Problem("duplicate", ANALYSIS_DIR, "sequence number {} used by {}".format(number, ", ".join(fnames))))
    for f in _stray_analyses(layout, digits):
        problems.append(Problem("location", os.path.relpath(f, layout.path), "analysis document outside {}".format(ANALYSIS_DIR)))

    if os.path.isfile(layout.samples_file):
        rel = os.path.relpath(layout.samples_file, layout.path)
        try:
            samples = read_sample_map(layout.samples_file)
        except SampleMapError as e:
            problems.append(Problem("samples", rel, e.msg))
        else:
            for sample, fn in missing_data(samples, layout.path):
                problems.append(Problem("samples", rel, "data for sample {} not found: {}".format(sample, fn)))
    return problems

def format_problems(problems):
    """Format problems, one per line"""
    return "\n".join("{:<10} {}: {}".format(x.kind, x.path, x.message) for x in problems)
