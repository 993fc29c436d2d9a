"""Shell core module"""
from cement.utils import shell

from bioproj.pm.core import command

def _text(out):
    return out.decode() if isinstance(out, bytes) else out

class ShCommandHandler(command.CommandHandler):
    """
    Runs external programs with cement's exec_cmd. Used for git.
    """
    class Meta:
        label = 'shell'

    def command(self, cmd_args, capture=True, ignore_error=False, cwd=None, **kw):
        def runpipe():
            (stdout, stderr, returncode) = shell.exec_cmd(cmd_args, cwd=cwd, shell=kw.get('shell', False))
            if returncode and not ignore_error:
                if capture:
                    self.app.log.error(_text(stderr))
                raise RuntimeError("'{}' failed with return code {}".format(" ".join(cmd_args), returncode))
            if capture:
                return _text(stdout)
        return self.dry(" ".join(cmd_args), runpipe)
