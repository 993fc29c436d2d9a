"""
Analysis document naming

Analysis documents are named by a zero-padded chronological sequence
number followed by an underscore and a short description, e.g.

   0001_quality_control.Rmd
   0002_differential_expression.ipynb

Rendered versions of a document (html, pdf) share its stem and are
not documents of their own.
"""
import os
import re
from collections import namedtuple

from bioproj.utils.string import slugify as _slugify, strip_extensions

DIGITS = 4

ANALYSIS_FORMATS = {
    'Rmd' : '.Rmd',
    'qmd' : '.qmd',
    'ipynb' : '.ipynb',
    'md' : '.md',
    }

OUTPUT_EXTENSIONS = ['.nb.html', '.html', '.pdf']

SLUG_PATTERN = r"[A-Za-z0-9][A-Za-z0-9_-]*"

class NamingError(Exception):
    """Exception raised for invalid analysis names.

    :param msg: the error message
    """

    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return self.msg

class AnalysisName(namedtuple("AnalysisName", ["number", "slug", "ext", "digits"])):
    """Parsed analysis document name"""
    __slots__ = ()

    @property
    def fmt(self):
        return self.ext.lstrip(".")

    @property
    def stem(self):
        return "{:0{}d}_{}".format(self.number, self.digits, self.slug)

    def __str__(self):
        return "{}{}".format(self.stem, self.ext)

def _name_regex(digits):
    return re.compile(r"^(\d{{{}}})_({})$".format(digits, SLUG_PATTERN))

def slugify(text):
    """Convert a free text description to an analysis slug.

    :param text: description

    :returns: slug
    """
    slug = _slugify(text)
    if not slug:
        raise NamingError("cannot make an analysis name from description '{}'".format(text))
    return slug

def format_analysis_name(number, slug, fmt="Rmd", digits=DIGITS):
    """Format an analysis document file name.

    :param number: sequence number, starting at 1
    :param slug: short description
    :param fmt: document format, one of ANALYSIS_FORMATS
    :param digits: number of digits in zero-padded sequence number

    :returns: AnalysisName
    """
    if fmt not in ANALYSIS_FORMATS:
        raise NamingError("unknown analysis format '{}'; choose one of {}".format(fmt, ", ".join(sorted(ANALYSIS_FORMATS))))
    if number < 1:
        raise NamingError("sequence numbers start at 1; got {}".format(number))
    if len(str(number)) > digits:
        raise NamingError("sequence number {} does not fit in {} digits".format(number, digits))
    if not re.match("^{}$".format(SLUG_PATTERN), slug):
        raise NamingError("invalid analysis description '{}'".format(slug))
    return AnalysisName(number, slug, ANALYSIS_FORMATS[fmt], digits)

def parse_analysis_name(fn, digits=DIGITS):
    """Parse an analysis document file name.

    :param fn: file name; directory part is ignored
    :param digits: number of digits in zero-padded sequence number

    :returns: AnalysisName or None if fn is not an analysis document
    """
    (stem, ext) = strip_extensions(os.path.basename(fn), list(ANALYSIS_FORMATS.values()))
    if ext is None:
        return None
    m = _name_regex(digits).match(stem)
    if not m:
        return None
    return AnalysisName(int(m.group(1)), m.group(2), ext, digits)

def is_output(fn, digits=DIGITS):
    """Check whether fn is a rendered version of an analysis document"""
    (stem, ext) = strip_extensions(os.path.basename(fn), OUTPUT_EXTENSIONS)
    if ext is None:
        return False
    return _name_regex(digits).match(stem) is not None

def list_analyses(path, digits=DIGITS):
    """List analysis documents in an analysis folder.

    Only plain files are considered; hidden files and directories
    (e.g. .ipynb_checkpoints, knitr figure folders) are skipped.

    :param path: analysis folder
    :param digits: number of digits in zero-padded sequence number

    :returns: tuple of (documents sorted by number, names of other files)
    """
    if not os.path.isdir(path):
        return ([], [])
    names = []
    other = []
    for f in sorted(os.listdir(path)):
        if f.startswith(".") or not os.path.isfile(os.path.join(path, f)):
            continue
        name = parse_analysis_name(f, digits)
        if name is not None:
            names.append(name)
        elif not is_output(f, digits):
            other.append(f)
    names.sort(key=lambda x: (x.number, str(x)))
    return (names, other)

def next_number(names):
    """Next sequence number; gaps are not refilled.

    :param names: list of AnalysisName

    :returns: int
    """
    if not names:
        return 1
    return max(x.number for x in names) + 1

def duplicate_numbers(names):
    """Find sequence numbers used by more than one document.

    :param names: list of AnalysisName

    :returns: dict mapping number to list of file names
    """
    seen = {}
    for x in names:
        seen.setdefault(x.number, []).append(str(x))
    return {k:v for k,v in seen.items() if len(v) > 1}
