"""
Project Management Tools
========================

Commands
---------

  project
    Manage projects
  analysis
    Manage analysis documents
  samples
    Manage the sample-to-path mapping
  workflow
    Manage the workflow definition

"""
from io import StringIO

from cement import App

from bioproj.pm.core import command
from bioproj.pm.core import shell
from bioproj.pm.core.log import PmLogHandler
from bioproj.pm.core.output import PmOutputHandler
from bioproj.pm.core.controller import PmController
from bioproj.pm.core.project import ProjectController
from bioproj.pm.core.analysis import AnalysisController
from bioproj.pm.core.samples import SamplesController
from bioproj.pm.core.workflow import WorkflowController
from bioproj.pm.lib.config import config_defaults, CONFIGFILE

class PmApp(App):
    """
    Main Pm application.

    """
    class Meta:
        label = "pm"
        base_controller = 'base'
        config_defaults = config_defaults
        config_files = [CONFIGFILE]
        log_handler = 'pmlog'
        output_handler = 'pmout'
        cmd_handler = 'shell'
        exit_on_close = True
        interfaces = [command.CommandInterface]
        handlers = [
            PmController,
            ProjectController,
            AnalysisController,
            SamplesController,
            WorkflowController,
            shell.ShCommandHandler,
            PmLogHandler,
            PmOutputHandler,
            ]

    def __init__(self, label=None, **kw):
        super(PmApp, self).__init__(label, **kw)
        self.cmd = None
        self._output_data = dict(stdout=StringIO(), stderr=StringIO())

    def setup(self):
        super(PmApp, self).setup()
        self._setup_cmd_handler()
        self._output_data = dict(stdout=StringIO(), stderr=StringIO())

    def _setup_cmd_handler(self):
        """Setup a command handler"""
        self.cmd = self.handler.resolve('command', self._meta.cmd_handler, setup=True)

def main(argv=None):
    with PmApp(argv=argv) as app:
        app.run()
        app.render(app._output_data)
