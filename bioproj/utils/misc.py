"""
Misc Module

"""
import sys
import os
import re

ANSWERS = {"yes" : True, "y" : True, "no" : False, "n" : False}
PROMPTS = {None : " [y/n] ", "yes" : " [Y/n] ", "no" : " [y/N] "}

def query_yes_no(question, default="yes", force=False):
    """Ask a yes/no question on the console.

    :param question: question to ask
    :param default: answer assumed on an empty reply: "yes", "no", or
      None to insist on an explicit answer
    :param force: don't ask; answer yes

    :returns: True for yes, False for no
    """
    if default not in PROMPTS:
        raise ValueError("invalid default answer: '{}'".format(default))
    while True:
        sys.stdout.write(question + PROMPTS[default])
        if force:
            return True
        choice = input().strip().lower()
        if default is not None and choice == '':
            return ANSWERS[default]
        if choice in ANSWERS:
            return ANSWERS[choice]
        sys.stdout.write("Please respond with 'yes' or 'no' (or 'y' or 'n').\n")

def filtered_walk(rootdir, filter_fn, include_dirs=None, exclude_dirs=None):
    """Perform a filtered directory walk.

    Directories are visited in sorted order.

    :param rootdir: Root directory
    :param filter_fn: Filtering function that returns boolean
    :param include_dirs: only keep files with one of these directory names in their path
    :param exclude_dirs: prune directories with these names from the walk

    :returns: Filtered file list
    """
    flist = []
    for root, dirs, files in os.walk(rootdir):
        if exclude_dirs:
            dirs[:] = [d for d in dirs if d not in exclude_dirs]
        dirs.sort()
        if include_dirs:
            parts = os.path.relpath(root, rootdir).split(os.sep)
            if not set(parts).intersection(include_dirs):
                continue
        flist = flist + [os.path.join(root, x) for x in sorted(filter(filter_fn, files))]
    return flist

def filtered_output(pattern, data):
    """
    Filter output

    :param pattern: a list or string of patterns
    :param data: a data list to filter

    :returns: filtered output
    """
    ## Sometimes read as string, sometimes as list...
    if not pattern:
        return list(data)
    if isinstance(pattern, str):
        re_obj = re.compile(pattern.strip().replace("\n", "|"))
    else:
        re_obj = re.compile("|".join(pattern))

    def ignore(line):
        return re_obj.match(line) == None
    return list(filter(ignore, data))
