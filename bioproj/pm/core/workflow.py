"""
Pm workflow module

Add rules to the project Snakefile one step at a time:

   pm workflow rule j_doe_rnaseq fastqc --input "data/{sample}.fastq.gz" \\
       --output "data/fastqc/{sample}_fastqc.zip" --shell "fastqc -o data/fastqc {input}"
"""
import os

from cement import ex

from bioproj.pm.core.controller import AbstractBaseController, COMMON_ARGUMENTS, PROJECT_ARGUMENT
from bioproj.pm.lib.workflow import WorkflowError, list_rules, validate_rule_name, render_rule

class WorkflowController(AbstractBaseController):
    """
    Functionality for the workflow definition.
    """
    class Meta:
        label = 'workflow'
        description = 'Manage the workflow definition'
        help = 'Manage the workflow definition'

    def _read(self, layout):
        if not os.path.isfile(layout.workflow_file):
            self._fail("No workflow definition {}; run 'pm project init {}' to restore the project layout".format(layout.workflow_file, self.app.pargs.project))
            return None
        with open(layout.workflow_file) as fh:
            return fh.read()

    @ex(help="Add a rule to the workflow definition",
        arguments=[
            PROJECT_ARGUMENT,
            (['rule'], dict(help="rule name", action="store")),
            (['-i', '--input'], dict(help="input file; can be given several times", action="append", default=None)),
            (['-o', '--output'], dict(help="output file; can be given several times", action="append", default=None)),
            (['--shell'], dict(help="shell command", action="store", default=None)),
            (['--script'], dict(help="script to run, e.g. scripts/plot.R", action="store", default=None)),
            (['--threads'], dict(help="number of threads", action="store", default=None, type=int)),
            ] + COMMON_ARGUMENTS)
    def rule(self):
        layout = self._layout()
        if layout is None:
            return
        text = self._read(layout)
        if text is None:
            return
        pargs = self.app.pargs
        try:
            validate_rule_name(pargs.rule, list_rules(text))
            data = render_rule(pargs.rule, input=pargs.input, output=pargs.output,
                               shell=pargs.shell, script=pargs.script, threads=pargs.threads)
        except WorkflowError as e:
            self._fail(str(e))
            return
        if pargs.script and not os.path.exists(os.path.join(layout.path, pargs.script)):
            self.app.log.warning("script {} does not exist yet".format(pargs.script))
        self.app.cmd.append(layout.workflow_file, data)

    @ex(help="List rules in the workflow definition",
        arguments=[PROJECT_ARGUMENT])
    def ls(self):
        layout = self._layout()
        if layout is None:
            return
        text = self._read(layout)
        if text is None:
            return
        rules = list_rules(text)
        if rules:
            self._write_stdout("\n".join(rules))
