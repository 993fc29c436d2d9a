"""
Pm Project module
=================

Provide functionality for project management.

Commands:
^^^^^^^^^

       init
         initialize a project folder
       ls
         list projects
       check
         check a project folder against the project conventions

Synopsis:
---------

The following command creates a directory in the project root
named j_doe_rnaseq, populated with the analysis, scripts, lib and
data folders and seeded README.md, Snakefile, Singularity and
lib/samples.tsv files. The '-g' flag initializes the project folder
for use with git.

   pm project init j_doe_rnaseq -g

Existing files are never overwritten, so init can be rerun on a
project to restore missing parts of the layout.

Code
====
"""
import os

from cement import ex

from bioproj.pm.core.controller import AbstractBaseController, COMMON_ARGUMENTS, PROJECT_ARGUMENT
from bioproj.pm.lib.layout import SAMPLES_FILE, GITIGNORE_FILE, PROJECT_DIRS, PROJECT_FILES
from bioproj.pm.lib.check import check_project, format_problems
from bioproj.templates import render
from bioproj.utils.timestamp import today
from bioproj.utils.misc import query_yes_no

## Main project controller
class ProjectController(AbstractBaseController):
    """
    Functionality for project management.
    """
    class Meta:
        label = 'project'
        description = 'Manage projects'
        help = 'Manage projects'

    def _container_source(self):
        """Split container image into singularity bootstrap agent and source"""
        image = self.app.config.get("project", "container_image")
        if "://" in image:
            return tuple(image.split("://", 1))
        return ("docker", image)

    def _seed_files(self, layout):
        """Contents of the files created by init"""
        (bootstrap, image) = self._container_source()
        kw = dict(name=layout.name,
                  title=self.app.pargs.title or layout.name,
                  description=self.app.pargs.description or "",
                  author=self.app.config.get("project", "author") or "",
                  date=today(),
                  samples_file=SAMPLES_FILE,
                  bootstrap=bootstrap,
                  image=image)
        return [
            (layout.readme_file, render("README.md.mako", **kw)),
            (layout.workflow_file, render("Snakefile.mako", **kw)),
            (layout.container_file, render("Singularity.mako", **kw)),
            (layout.samples_file, render("samples.tsv.mako", **kw)),
            ]

    def _foreign_folder(self, layout):
        """Existing non-empty folder without any prescribed entry"""
        if not layout.exists() or not layout.unexpected():
            return False
        return len(layout.missing()) == len(PROJECT_DIRS + PROJECT_FILES)

    def _init_git(self, layout):
        """Initialize git repository in project folder"""
        self.app.cmd.write(os.path.join(layout.path, GITIGNORE_FILE), render("gitignore.mako"))
        if os.path.exists(os.path.join(layout.path, ".git")):
            self.app.log.info("git repository already initialized in {}".format(layout.path))
            return
        try:
            self.app.cmd.command(["git", "init"], cwd=layout.path)
        except (OSError, RuntimeError) as e:
            self._fail("git initialization failed: {}".format(e))

    ## init
    @ex(help="Initialize project folder",
        arguments=[
            PROJECT_ARGUMENT,
            (['-g', '--git'], dict(help="Initialize git repository in project folder", default=False, action="store_true")),
            (['--title'], dict(help="project title for README", action="store", default=None)),
            (['--description'], dict(help="project description for README", action="store", default=None)),
            ] + COMMON_ARGUMENTS)
    def init(self):
        layout = self._layout(must_exist=False)
        if layout is None:
            return
        if os.path.exists(layout.path) and not os.path.isdir(layout.path):
            self._fail("{} exists and is not a directory".format(layout.path))
            return
        if self._foreign_folder(layout):
            if not query_yes_no("{} is not empty and does not look like a project folder; initialize anyway?".format(layout.path), default="no", force=self.app.pargs.force):
                self.app.log.info("not initializing {}".format(layout.path))
                return
        self.app.log.info("Initializing project {}".format(layout.path))
        self.app.cmd.safe_makedir(layout.path)
        for d in layout.dirs():
            self.app.cmd.safe_makedir(d)
        for fn, data in self._seed_files(layout):
            self.app.cmd.write(fn, data)
        if self.app.pargs.git:
            self._init_git(layout)

    ## ls
    @ex(help="List projects in project root")
    def ls(self):
        self._ls(self._project_root(), filter_output=True, dirs_only=True)

    ## check
    @ex(help="Check project folder against project conventions",
        arguments=[PROJECT_ARGUMENT])
    def check(self):
        layout = self._layout()
        if layout is None:
            return
        problems = check_project(layout.path, self._digits())
        if problems:
            self._write_stdout(format_problems(problems))
            self._fail("{} problem(s) found in project {}".format(len(problems), layout.name))
        else:
            self.app.log.info("project {} follows the project conventions".format(layout.name))
