"""Pm Output Handler"""
import sys

from cement.core.output import OutputHandler

class PmOutputHandler(OutputHandler):
    """
    Commands buffer their results in app._output_data; this handler
    turns the buffers into the final output once the command is done.
    """
    class Meta:
        label = 'pmout'

    def render(self, data, template=None, **kw):
        """
        Dry-run reports and other messages in data['stderr'] go straight
        to sys.stderr. data['stdout'] is returned, newline terminated,
        for the application to print.

        :param data: dict of StringIO buffers with keys stdout and stderr
        :param template: unused
        """
        err = data["stderr"].getvalue()
        if err:
            sys.stderr.write(err)
        out = data["stdout"].getvalue()
        if out and not out.endswith("\n"):
            out += "\n"
        return out
