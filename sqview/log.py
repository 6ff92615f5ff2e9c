"""
<Program Name>
  log.py

<Started>
  March 2, 2026

<Purpose>
  Configures the "sqview" base logger. sqview talks to the user through the
  host (status messages, the output buffer and `Host.report_error`), the log
  is for everything around that:

  - the invocation pipeline logs the command line it runs and the exit code
    of 'sq' at INFO, and stderr of 'sq' at INFO if it is not merged into the
    output (see `sqview.settings.MERGE_STDERR`),
  - `ConsoleHost.report_error` logs reported failures at ERROR, and the
    interactive commands log the failure type at DEBUG before reporting it,
  - `sqview.user_settings` warns about settings it cannot convert,
  - the `sqview` command line tool logs the failure that makes it exit with 1.

  The base logger writes to 'sys.stderr' at level WARNING, or DEBUG if
  'sqview.settings.DEBUG' is 'True'. In DEBUG the messages carry the logger
  name and line number and `error` adds the stacktrace, if there is one.

<Usage>
  The `sqview` command line tool maps '--verbose' and '--quiet' to the base
  logger's level, i.e. '-v' shows the INFO messages of the pipeline and '-q'
  silences even errors:

  ```
  LOG = logging.getLogger("sqview")
  LOG.setLevelVerboseOrQuiet(args.verbose, args.quiet)
  ```

  sqview modules log to a child logger, e.g.:

  ```
  LOG = logging.getLogger(__name__)
  LOG.info("Running 'sq packet dump' on 512 bytes of input")
  ```

"""
import sys
import logging
import sqview.settings

# Different log message formats for different log levels
FORMAT_MESSAGE = "%(message)s"
FORMAT_DEBUG = "%(name)s:%(lineno)d:%(levelname)s:%(message)s"

# Cache default logger class, should be logging.Logger if not changed elsewhere
_LOGGER_CLASS = logging.getLoggerClass()

# Create logger subclass
class SqviewLogger(_LOGGER_CLASS):
  """logger.Logging subclass, providing custom error method and
  convenience method for log levels. """

  QUIET = logging.CRITICAL + 1

  def error(self, msg, *args, **kwargs):
    """Show stacktrace depending on its availability and the logger's log
    level, i.e. only show stacktrace in DEBUG level. """
    show_stacktrace = (self.level == logging.DEBUG and
        sys.exc_info() != (None, None, None))
    kwargs.setdefault("exc_info", show_stacktrace)
    return super(SqviewLogger, self).error(msg, *args, **kwargs)

  # Allow non snake_case function name for consistency with logging library
  def setLevelVerboseOrQuiet(self, verbose, quiet): # pylint: disable=invalid-name
    """Convenience method to set the logger's verbosity level based on the
    passed booleans verbose and quiet (useful for cli tools). """
    if verbose:
      self.setLevel(logging.INFO)

    elif quiet:
      self.setLevel(self.QUIET)


# Temporarily change logger default class to instantiate an sqview base logger
logging.setLoggerClass(SqviewLogger)
LOGGER = logging.getLogger("sqview")
logging.setLoggerClass(_LOGGER_CLASS)

# In DEBUG mode we log all log types and add additional information,
# otherwise we only log warning, error and critical and only the message.
if sqview.settings.DEBUG: # pragma: no cover
  LEVEL = logging.DEBUG
  FORMAT_STRING = FORMAT_DEBUG

else:
  LEVEL = logging.WARNING
  FORMAT_STRING = FORMAT_MESSAGE

# Add a StreamHandler with the chosen format to sqview's base logger,
# which will write log messages to `sys.stderr`.
FORMATTER = logging.Formatter(FORMAT_STRING)
HANDLER = logging.StreamHandler()
HANDLER.setFormatter(FORMATTER)
LOGGER.addHandler(HANDLER)
LOGGER.setLevel(LEVEL)
