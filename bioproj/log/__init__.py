"""
log module

Console logging for library code that runs without an application.
"""
import sys
import logbook

def minimal_logger(namespace, debug=False):
    """Make a logbook logger writing to stdout.

    This logger is independent of the application's log handler, which
    is only available once the application has been set up. DEBUG
    messages are shown if debug is set or '--debug' is on the command
    line.

    :param namespace: logger channel, usually the module's __name__
    :param debug: log at DEBUG level

    :returns: logbook.Logger
    """
    level = logbook.DEBUG if (debug or '--debug' in sys.argv) else logbook.INFO
    log = logbook.Logger(namespace, level=level)
    log.handlers.append(logbook.StreamHandler(sys.stdout, level=level, bubble=True))
    return log
