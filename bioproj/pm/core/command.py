"""pm command core module.

All changes a command makes to a project go through the command
handler, so that ``--dry_run`` can report them instead.
"""
import os
from abc import abstractmethod

from cement.core.interface import Interface
from cement.core.handler import Handler

class CommandInterface(Interface):
    """
    Interface for handlers that run external programs and change the
    file system on behalf of controllers.
    """
    class Meta:
        interface = 'command'

    @abstractmethod
    def command(self, cmd_args, capture=True, ignore_error=False, cwd=None, **kw):
        """
        Run an external program.

        :param cmd_args: program and arguments <list>
        :param capture: return the program's standard output
        :param ignore_error: don't raise on non-zero exit status
        :param cwd: working directory
        """
        pass

class CommandHandler(CommandInterface, Handler):
    """
    Base class for command handlers. Provides the dry-run aware file
    system helpers.
    """
    class Meta:
        pass

    def _dry_run(self):
        return getattr(self.app.pargs, "dry_run", False)

    def _verbose(self):
        return getattr(self.app.pargs, "verbose", False)

    def dry(self, message, func, *args, **kw):
        """Call func unless in dry-run mode, in which case message is
        written to the buffered stderr as '(DRY_RUN): message'.

        :param message: description of the action
        :param func: action to perform
        :param args: positional arguments to func
        :param kw: keyword arguments to func

        :returns: return value of func, None in dry-run mode
        """
        if self._dry_run():
            self.app._output_data["stderr"].write("(DRY_RUN): " + message + "\n")
            return None
        if self._verbose():
            self.app.log.info(message)
        else:
            self.app.log.debug(message)
        return func(*args, **kw)

    def safe_makedir(self, dname):
        """Create directory dname and missing parents; an existing
        directory is left as it is.

        :returns: dname
        """
        def runpipe():
            if os.path.isdir(dname):
                self.app.log.info("Directory {} already exists".format(dname))
                return dname
            try:
                os.makedirs(dname)
            except OSError:
                if not os.path.isdir(dname):
                    raise
            return dname
        return self.dry("Make directory {}".format(dname), runpipe)

    def write(self, fn, data=None, overwrite=False):
        """Write data to a new file. Existing files are kept unless
        overwrite is set; a warning is logged instead.

        :param fn: file name
        :param data: text to write
        :param overwrite: replace an existing file

        :returns: fn if written, None otherwise
        """
        def runpipe():
            try:
                with open(fn, "w" if overwrite else "x") as fh:
                    fh.write(data or "")
            except FileExistsError:
                self.app.log.warning("not overwriting existing file {}".format(fn))
                return None
            return fn
        return self.dry("writing data to file {}".format(fn), runpipe)

    def append(self, fn, data):
        """Append data to an existing file, starting on a new line.

        :returns: fn if written, None if fn does not exist
        """
        def runpipe():
            if not os.path.exists(fn):
                self.app.log.warning("not appending to non-existing file {}".format(fn))
                return None
            with open(fn) as fh:
                text = fh.read()
            with open(fn, "a") as fh:
                if text and not text.endswith("\n"):
                    fh.write("\n")
                fh.write(data)
            return fn
        return self.dry("appending data to file {}".format(fn), runpipe)
