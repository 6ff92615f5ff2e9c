"""
<Program Name>
  commands.py

<Started>
  March 6, 2026

<Purpose>
  Provides the interactive commands, i.e. fixed argument calls of the
  invocation pipeline plus one free-form command, for which the user types the
  arguments.

  All commands take the host as their only positional argument, so that they
  can be bound to key chords (see `sqview.keybindings`). They feed the active
  selection to the tool, or the whole document if there is no selection.

  Failures are reported through the host's error channel instead of being
  raised, as befits a command that is invoked from a key chord.

"""
import logging

import sqview.pipeline
from sqview.exceptions import Error, EmptyCommandError
from sqview.models.input_source import Span, WholeDocument

# Inherits from sqview base logger (c.f. sqview.log)
LOG = logging.getLogger(__name__)

COMMAND_PROMPT = "sq "

COMMAND_ARGUMENTS = {
  "dump": ("packet", "dump"),
  "hex-dump": ("packet", "dump", "--hex"),
  "mpi-dump": ("packet", "dump", "--mpis"),
  "inspect": ("inspect",),
}


def split_arguments(text):
  """Split a free-form argument string on whitespace.

  There is no support for quoting or escaping, i.e. an argument that contains
  whitespace cannot be passed this way. """
  return text.split()


def current_input_source(host):
  """Return a Span for the host's active selection, or WholeDocument if
  nothing is selected. """
  selection = host.selection()
  if selection is None:
    return WholeDocument()

  start, end = selection
  return Span(start, end)


def _report(host, error):
  """Log and report a failed command through the host. """
  LOG.debug("(sqview) {0}: {1}".format(type(error).__name__, error))
  host.report_error(str(error))


def _run_interactively(host, arguments):
  """Invoke the pipeline on the current selection and report sqview errors
  through the host. Returns the output, or None on failure. """
  try:
    return sqview.pipeline.invoke(host, arguments,
        current_input_source(host))

  except Error as e:
    _report(host, e)
    return None


def sq_dump(host):
  """Show a structural dump of the OpenPGP data. """
  return _run_interactively(host, COMMAND_ARGUMENTS["dump"])


def sq_hex_dump(host):
  """Show a structural dump annotated with the raw bytes. """
  return _run_interactively(host, COMMAND_ARGUMENTS["hex-dump"])


def sq_mpi_dump(host):
  """Show a structural dump including the MPIs. """
  return _run_interactively(host, COMMAND_ARGUMENTS["mpi-dump"])


def sq_inspect(host):
  """Show a summary of the OpenPGP data. """
  return _run_interactively(host, COMMAND_ARGUMENTS["inspect"])


def sq_command(host, text=None):
  """
  <Purpose>
    Run the tool with free-form arguments on the current selection (or
    document).

  <Arguments>
    host:
            The host editor, a sqview.host.Host instance.

    text: (optional)
            The argument string, e.g. "armor --kind secret-key". It is split
            on whitespace, see `split_arguments`. If not passed, the user is
            prompted for it.

  <Exceptions>
    None. Failures are reported through `host.report_error`, including an
    empty argument string and a prompt that is closed without an answer.

  <Returns>
    The output shown to the user, or None on failure.

  """
  try:
    if text is None:
      text = host.read_string(COMMAND_PROMPT)

    arguments = split_arguments(text)
    if not arguments:
      raise EmptyCommandError("No arguments for 'sq' given")

  except (EOFError, EmptyCommandError) as e:
    _report(host, e)
    return None

  return _run_interactively(host, arguments)


COMMANDS = {
  "dump": sq_dump,
  "hex-dump": sq_hex_dump,
  "mpi-dump": sq_mpi_dump,
  "inspect": sq_inspect,
  "command": sq_command,
}


def run_command(host, name, *args):
  """Run the command registered under `name` (see COMMANDS). Extra arguments
  are passed on, e.g. the argument string of the free-form command. """
  try:
    command = COMMANDS[name]

  except KeyError:
    raise ValueError("Unknown command '{}', available commands are: {}".format(
        name, ", ".join(sorted(COMMANDS)))) from None

  return command(host, *args)
