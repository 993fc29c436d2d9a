"""String utils module"""
import re
import unicodedata

def replace_ascii(s):
    """Replace accented characters with their closest ascii counterparts,
    dropping anything that has none.

    :param s: string

    :returns: ascii string
    """
    s = unicodedata.normalize("NFKD", s)
    return s.encode('ascii', 'ignore').decode('ascii')

def slugify(s, sep="_"):
    """Turn a free text description into a file name friendly slug.

    :param s: string to convert
    :param sep: separator replacing runs of non-alphanumeric characters

    :returns: lowercase slug, possibly empty
    """
    s = replace_ascii(s).lower()
    s = re.sub("[^a-z0-9]+", sep, s)
    return s.strip(sep)

def strip_extensions(fn, ext=[]):
    """Strip extensions from a filename.

    :param fn: filename
    :param ext: list of extensions to strip

    :returns: stripped version of fn and extension
    """
    ## Longest first so that e.g. .nb.html wins over .html
    pattern = "|".join(".*({})$".format(re.escape(x)) for x in sorted(ext, key=len, reverse=True))
    if not pattern:
        return (fn, None)
    m = re.match(pattern, fn)
    if not m:
        return (fn, None)
    found = [g for g in m.groups() if g is not None][0]
    return (fn[:-len(found)], found)
