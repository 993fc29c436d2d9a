"""Pm Controller Module"""
import os
import pprint

from cement import Controller

import bioproj
from bioproj.pm.lib.help import PmHelpFormatter
from bioproj.pm.lib.config import CONFIG_EXAMPLE
from bioproj.pm.lib.layout import ProjectLayout
from bioproj.pm.lib.naming import DIGITS
from bioproj.utils.misc import filtered_output

## Arguments shared by commands that write to the file system
COMMON_ARGUMENTS = [
    (['-n', '--dry_run'], dict(help="dry_run - don't actually do anything", action="store_true", default=False)),
    (['--force'], dict(help="force execution; don't ask for confirmation", action="store_true", default=False)),
    (['--verbose'], dict(help="verbose mode", action="store_true", default=False)),
    ]

PROJECT_ARGUMENT = (['project'], dict(help="Project name (e.g. j_doe_rnaseq), relative to the project root, or path to project folder", action="store"))

class AbstractBaseController(Controller):
    """
    This is an abstract base controller.

    All controllers should inherit from this class.
    """
    class Meta:
        stacked_on = 'base'
        stacked_type = 'nested'
        argument_formatter = PmHelpFormatter

    def _default(self):
        self._parser.print_help()

    def _check_pargs(self, pargs, msg=None):
        """Check that list of pargs are present"""
        for p in pargs:
            if not getattr(self.app.pargs, p, None):
                self.app.log.warning("Required argument '{}' lacking".format(p))
                return False
        return True

    def _fail(self, msg):
        """Log an error and make the application exit with non-zero status"""
        self.app.log.error(msg)
        self.app.exit_code = 1

    def _project_root(self):
        root = self.app.config.get("project", "root") or os.curdir
        return os.path.abspath(os.path.expanduser(root))

    def _project_path(self, project):
        """Resolve project name against project root. Absolute paths
        are returned as is."""
        return os.path.normpath(os.path.join(self._project_root(), os.path.expanduser(project)))

    def _layout(self, must_exist=True):
        """Layout of the project given on the command line.

        :param must_exist: fail if project folder is missing

        :returns: ProjectLayout, or None on failure
        """
        if not self._check_pargs(["project"]):
            return None
        layout = ProjectLayout(self._project_path(self.app.pargs.project))
        if must_exist and not layout.exists():
            self._fail("No such project folder {}; run 'pm project init {}' first".format(layout.path, self.app.pargs.project))
            return None
        return layout

    def _digits(self):
        return int(self.app.config.get("analysis", "digits") or DIGITS)

    def _write_stdout(self, text):
        self.app._output_data["stdout"].write(text)

    def _ls(self, path, filter_output=False, dirs_only=False):
        """List contents of path"""
        if not os.path.exists(path):
            self.app.log.info("No such path {}".format(path))
            return
        out = sorted(os.listdir(path))
        if dirs_only:
            out = [x for x in out if os.path.isdir(os.path.join(path, x))]
        if filter_output:
            out = filtered_output(self.app.config.get("config", "ignore"), out)
        if out:
            self._write_stdout("\n".join(out))

class PmController(Controller):
    """
    Main Pm Controller.

    """
    class Meta:
        label = 'base'
        description = 'Project management tools for bioinformatics research projects'
        argument_formatter = PmHelpFormatter
        arguments = [
            (['--config'], dict(help="print configuration", action="store_true")),
            (['--config-example'], dict(help="print configuration example", action="store_true")),
            (['-v', '--version'], dict(action="version", version="pm {}".format(bioproj.__version__))),
            ]

    def _default(self):
        if self.app.pargs.config:
            out = {k:self.app.config.get_section_dict(k) for k in self.app.config.get_sections()}
            self.app._output_data["stdout"].write(pprint.pformat(out, indent=4))
        elif self.app.pargs.config_example:
            self.app._output_data["stdout"].write(CONFIG_EXAMPLE)
        else:
            self._parser.print_help()
