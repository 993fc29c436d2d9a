"""
Sample-to-path mapping

The sample map is a tab-separated text file pairing sample names with
the locations of their (large) data files:

   # sample	path
   P1_101	/proj/raw/P1_101_R1.fastq.gz
   P1_102	/proj/raw/P1_102_R1.fastq.gz

Blank lines and lines starting with '#' are ignored, as are columns
beyond the second. Relative paths are relative to the project folder.
"""
import os
import re
import csv
from collections import OrderedDict

from bioproj.log import minimal_logger

LOG = minimal_logger(__name__)

class SampleMapError(Exception):
    """Exception raised for malformed sample maps.

    :param msg: the error message
    """

    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return self.msg

def validate_sample_name(name):
    """Validate a sample name. Names must be non-empty, must not
    contain whitespace or double quotes and must not start with '#',
    which would turn the entry into a comment.

    :param name: sample name
    """
    if not name or re.search(r"[\s\"]", name) or name.startswith("#"):
        raise SampleMapError("invalid sample name '{}': names must be non-empty, must not start with '#' and contain no whitespace or '\"'".format(name))
    return name

def parse_sample_map(lines, source="<sample map>"):
    """Parse sample map lines.

    :param lines: iterable of lines
    :param source: name of input used in error messages

    :returns: OrderedDict mapping sample name to path
    """
    samples = OrderedDict()
    for lineno, line in enumerate(lines, 1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        row = next(csv.reader([line.rstrip("\r\n")], delimiter="\t", quoting=csv.QUOTE_NONE))
        if len(row) < 2 or not row[1].strip():
            raise SampleMapError("{}, line {}: expected sample name and path separated by a tab".format(source, lineno))
        name = row[0].strip()
        try:
            validate_sample_name(name)
        except SampleMapError as e:
            raise SampleMapError("{}, line {}: {}".format(source, lineno, e.msg))
        if name in samples:
            raise SampleMapError("{}, line {}: duplicate sample name '{}'".format(source, lineno, name))
        samples[name] = row[1].strip()
    return samples

def read_sample_map(fn):
    """Read a sample map file.

    :param fn: file name

    :returns: OrderedDict mapping sample name to path
    """
    LOG.debug("reading sample map {}".format(fn))
    with open(fn) as fh:
        return parse_sample_map(fh, source=fn)

def format_sample_line(sample, path):
    """Format a sample map entry.

    :param sample: sample name
    :param path: data path

    :returns: tab-separated line including newline
    """
    validate_sample_name(sample)
    if not path or "\t" in path or "\n" in path:
        raise SampleMapError("invalid path '{}' for sample '{}'".format(path, sample))
    return "{}\t{}\n".format(sample, path)

def resolve_path(path, project_path):
    """Resolve a sample path against the project folder"""
    path = os.path.expanduser(path)
    if os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(project_path, path))

def missing_data(samples, project_path):
    """Find samples whose data path does not exist.

    :param samples: mapping of sample name to path
    :param project_path: project folder

    :returns: list of (sample, resolved path) tuples
    """
    return [(k, resolve_path(v, project_path)) for k, v in samples.items() if not os.path.exists(resolve_path(v, project_path))]
