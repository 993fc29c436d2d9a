"""
Pm samples module

Maintain the sample-to-path mapping in lib/samples.tsv.
"""
import os

from cement import ex

from bioproj.pm.core.controller import AbstractBaseController, COMMON_ARGUMENTS, PROJECT_ARGUMENT
from bioproj.pm.lib.samples import SampleMapError, read_sample_map, format_sample_line, resolve_path, missing_data
from bioproj.templates import render

class SamplesController(AbstractBaseController):
    """
    Functionality for the sample map.
    """
    class Meta:
        label = 'samples'
        description = 'Manage the sample-to-path mapping'
        help = 'Manage the sample-to-path mapping'

    def _read(self, layout):
        """Read sample map; a missing file is an empty map"""
        if not os.path.exists(layout.samples_file):
            return {}
        try:
            return read_sample_map(layout.samples_file)
        except SampleMapError as e:
            self._fail(str(e))
            return None

    @ex(help="Map a sample name to the location of its data",
        arguments=[
            PROJECT_ARGUMENT,
            (['sample'], dict(help="sample name", action="store")),
            (['path'], dict(help="data location; relative paths are relative to the project folder", action="store")),
            ] + COMMON_ARGUMENTS)
    def add(self):
        layout = self._layout()
        if layout is None:
            return
        samples = self._read(layout)
        if samples is None:
            return
        sample = self.app.pargs.sample
        if sample in samples:
            self._fail("sample {} already mapped to {}; edit {} by hand to change it".format(sample, samples[sample], layout.samples_file))
            return
        try:
            line = format_sample_line(sample, self.app.pargs.path)
        except SampleMapError as e:
            self._fail(str(e))
            return
        if not os.path.exists(resolve_path(self.app.pargs.path, layout.path)):
            self.app.log.warning("data for sample {} not found at {}".format(sample, self.app.pargs.path))
        if os.path.exists(layout.samples_file):
            self.app.cmd.append(layout.samples_file, line)
        else:
            self.app.cmd.write(layout.samples_file, render("samples.tsv.mako", name=layout.name) + line)

    @ex(help="List sample map",
        arguments=[
            PROJECT_ARGUMENT,
            (['--missing'], dict(help="only list samples whose data cannot be found", action="store_true", default=False)),
            ])
    def ls(self):
        layout = self._layout()
        if layout is None:
            return
        samples = self._read(layout)
        if samples is None:
            return
        if self.app.pargs.missing:
            out = missing_data(samples, layout.path)
        else:
            out = list(samples.items())
        if out:
            self._write_stdout("\n".join("{}\t{}".format(k, v) for k, v in out))
