"""pm log core module

Application logging through logbook. Messages go to stderr and,
when ``[log] file`` is set, to a plain or rotating log file:

    [log]
    level = INFO
    file = ~/log/pm.log
    rotate = true
    max_bytes = 512000
    max_files = 4
"""
import os
import logbook

from cement.core.log import LogHandler
from cement.utils.misc import is_true
from cement.utils import fs

class PmLogHandler(LogHandler):
    """
    Implementation of the cement log interface on top of logbook.
    """
    class Meta:
        label = 'pmlog'

        namespace = "pm"
        """Logger channel; falls back to the application label."""

        file_format = "{record.time} ({record.level_name}) {record.channel} : {record.message}"
        console_format = "{record.time:%Y-%m-%d %H:%M} ({record.level_name}): {record.message}"
        debug_format = "{record.time} ({record.level_name}) {record.channel} : {record.message}"

        clear_loggers = True

        log_level_argument = None
        """No --log-level option; the level comes from [log] level and --debug."""

        config_section = 'log'
        config_defaults = dict(
            file=None,
            level='INFO',
            to_console=True,
            rotate=False,
            max_bytes=512000,
            max_files=4,
            )

    levels = ['INFO', 'WARNING', 'ERROR', 'DEBUG', 'CRITICAL']
    aliases = {'WARN' : 'WARNING', 'FATAL' : 'CRITICAL'}

    def __init__(self, *args, **kw):
        super(PmLogHandler, self).__init__(*args, **kw)
        self.app = None
        self.backend = None
        self.level = logbook.INFO
        self._console_handler = None
        self._file_handler = None

    def _setup(self, app_obj):
        super(PmLogHandler, self)._setup(app_obj)
        if self._meta.namespace is None:
            self._meta.namespace = self.app._meta.label
        self.backend = logbook.Logger(self._meta.namespace)

        if is_true(self.app._meta.debug):
            self.app.config.set('log', 'level', 'DEBUG')
        self.set_level(self.app.config.get('log', 'level'))

        if is_true(self._meta.clear_loggers):
            self.clear_loggers()
        if is_true(self.app.config.get('log', 'to_console')):
            self._console_handler = self._add_handler(logbook.StderrHandler, self._meta.console_format)
        if self.app.config.get('log', 'file'):
            self._file_handler = self._setup_file_log()
        ## Records stop here instead of reaching logbook's global default handler
        self.backend.handlers.append(logbook.NullHandler())
        self.debug("logging initialized for '{}' at level {}".format(self._meta.namespace, self.get_level()))

    def _add_handler(self, cls, fmt_string, *args, **kw):
        """Instantiate a logbook handler and attach it to the backend"""
        if self.level == logbook.DEBUG:
            fmt_string = self._meta.debug_format
        handler = cls(*args, format_string=fmt_string, level=self.level, bubble=True, **kw)
        self.backend.handlers.append(handler)
        return handler

    def _setup_file_log(self):
        file_path = os.path.expandvars(fs.abspath(self.app.config.get('log', 'file')))
        log_dir = os.path.dirname(file_path)
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if is_true(self.app.config.get('log', 'rotate')):
            return self._add_handler(logbook.RotatingFileHandler, self._meta.file_format, file_path,
                                     max_size=int(self.app.config.get('log', 'max_bytes')),
                                     backup_count=int(self.app.config.get('log', 'max_files')))
        return self._add_handler(logbook.FileHandler, self._meta.file_format, file_path)

    def set_level(self, level):
        """
        Set the log level. WARN and FATAL are accepted for WARNING and
        CRITICAL; anything unknown means INFO.

        :param level: level name, case insensitive
        """
        level = str(level).upper()
        level = self.aliases.get(level, level)
        if level not in self.levels:
            level = 'INFO'
        self.level = logbook.lookup_level(level)
        for handler in [self._console_handler, self._file_handler]:
            if handler is not None:
                handler.level = self.level

    def get_level(self):
        return logbook.get_level_name(self.level)

    def _log(self, method, msg, namespace=None, **kw):
        extra = kw.setdefault('extra', {})
        extra.setdefault('namespace', namespace or self._meta.namespace)
        getattr(self.backend, method)(msg, **kw)

    def info(self, msg, namespace=None, **kw):
        self._log('info', msg, namespace, **kw)

    def debug(self, msg, namespace=None, **kw):
        self._log('debug', msg, namespace, **kw)

    def warning(self, msg, namespace=None, **kw):
        self._log('warning', msg, namespace, **kw)

    warn = warning

    def error(self, msg, namespace=None, **kw):
        self._log('error', msg, namespace, **kw)

    def fatal(self, msg, namespace=None, **kw):
        self._log('critical', msg, namespace, **kw)

    critical = fatal

    def clear_loggers(self):
        """Drop handlers attached by a previous setup"""
        if self.backend is not None:
            self.backend.handlers = []
