"""
Pm analysis module

Analysis documents live in the analysis folder of a project and
are numbered in the order they are started. 'new' picks the next
free number and seeds the document with a header for the goal,
hypothesis, resources and plan of the analysis:

   pm analysis new j_doe_rnaseq "differential expression" --format ipynb
"""
import os

from cement import ex

from bioproj.pm.core.controller import AbstractBaseController, COMMON_ARGUMENTS, PROJECT_ARGUMENT
from bioproj.pm.lib.analysis import render_analysis
from bioproj.pm.lib.naming import ANALYSIS_FORMATS, NamingError, slugify, format_analysis_name, list_analyses, next_number
from bioproj.utils.timestamp import today

## Main analysis controller
class AnalysisController(AbstractBaseController):
    """
    Functionality for analysis management.
    """
    class Meta:
        label = 'analysis'
        description = 'Manage analysis documents'
        help = 'Manage analysis documents'

    def _analysis_dir(self, layout):
        if not os.path.isdir(layout.analysis_dir):
            self._fail("No analysis folder in {}; run 'pm project init {}' to restore the project layout".format(layout.path, self.app.pargs.project))
            return None
        return layout.analysis_dir

    @ex(help="Start a new analysis document",
        arguments=[
            PROJECT_ARGUMENT,
            (['description'], dict(help="short description of the analysis, used in the file name", nargs="+")),
            (['-f', '--format'], dict(help="document format (default from configuration)", choices=sorted(ANALYSIS_FORMATS), default=None, dest="fmt")),
            (['--title'], dict(help="document title (default: the description)", action="store", default=None)),
            (['--goal'], dict(help="goal of the analysis", action="store", default="")),
            ] + COMMON_ARGUMENTS)
    def new(self):
        layout = self._layout()
        if layout is None:
            return
        path = self._analysis_dir(layout)
        if path is None:
            return
        description = " ".join(self.app.pargs.description)
        fmt = self.app.pargs.fmt or self.app.config.get("analysis", "format")
        digits = self._digits()
        (names, _) = list_analyses(path, digits)
        try:
            name = format_analysis_name(next_number(names), slugify(description), fmt, digits)
        except NamingError as e:
            self._fail(str(e))
            return
        data = render_analysis(name.fmt, title=self.app.pargs.title or description,
                               author=self.app.config.get("project", "author") or "",
                               date=today(), goal=self.app.pargs.goal)
        fn = self.app.cmd.write(os.path.join(path, str(name)), data)
        if fn:
            self._write_stdout(fn)

    @ex(help="List analysis documents in order",
        arguments=[PROJECT_ARGUMENT])
    def ls(self):
        layout = self._layout()
        if layout is None:
            return
        path = self._analysis_dir(layout)
        if path is None:
            return
        (names, other) = list_analyses(path, self._digits())
        if other:
            self.app.log.warning("files not following the naming convention in {}: {}".format(path, ", ".join(other)))
        if names:
            self._write_stdout("\n".join(str(x) for x in names))
