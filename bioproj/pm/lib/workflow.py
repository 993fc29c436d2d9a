"""
Workflow definition library

The workflow definition (a Snakefile) grows one rule at a time as
the project progresses. This module only reads and writes rule
definitions; running them is left to snakemake.
"""
import re
import keyword

from bioproj.templates import render

RULE_RE = re.compile(r"^(?:rule|checkpoint)\s+([A-Za-z_]\w*)\s*:", re.M)

class WorkflowError(Exception):
    """Exception raised for invalid workflow rules.

    :param msg: the error message
    """

    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return self.msg

def list_rules(text):
    """List rule names in workflow text, in file order.

    :param text: workflow definition text

    :returns: list of rule names
    """
    return RULE_RE.findall(text)

def validate_rule_name(name, existing=None):
    """Validate a new rule name.

    :param name: rule name
    :param existing: names of rules and checkpoints already defined
    """
    if not name.isidentifier() or keyword.iskeyword(name):
        raise WorkflowError("invalid rule name '{}': must be a valid python identifier".format(name))
    if name in (existing or []):
        raise WorkflowError("rule '{}' already defined".format(name))
    return name

def render_rule(name, input=None, output=None, shell=None, script=None, threads=None):
    """Render a rule definition.

    :param name: rule name
    :param input: list of input files
    :param output: list of output files
    :param shell: shell command
    :param script: script to run, conventionally in scripts/
    :param threads: number of threads

    :returns: rule text
    """
    if bool(shell) == bool(script):
        raise WorkflowError("rule '{}' needs exactly one of shell command or script".format(name))
    return render("rule.mako", name=name, input=input or [], output=output or [],
                  shell=shell, script=script, threads=threads)
