"""
<Program Name>
  pipeline.py

<Started>
  March 5, 2026

<Purpose>
  Provides the invocation pipeline, which runs the OpenPGP tool on the bytes of
  an input source, captures what the tool writes into the shared output buffer
  of the host and presents that buffer to the user.

  There is exactly one output buffer per host (see
  `sqview.settings.OUTPUT_BUFFER_NAME`). Each invocation clears and refills it,
  no output of an earlier invocation is kept.

  Invocations are synchronous, the caller is blocked until the tool exits.

"""
import logging

import sqview.settings
import sqview.process as process
import sqview.formats as formats
from sqview.models.input_source import Literal
from sqview.exceptions import CommandNotFoundError

OUTPUT_ENCODING = "utf-8"
NO_OUTPUT_MESSAGE = "(sq: no output)"

# Inherits from sqview base logger (c.f. sqview.log)
LOG = logging.getLogger(__name__)


def fits_status_line(text, max_width=None):
  """Return True if `text` has no line break and is at most `max_width`
  (default: sqview.settings.STATUS_LINE_MAX_WIDTH) characters long. """
  if max_width is None:
    max_width = sqview.settings.STATUS_LINE_MAX_WIDTH

  return "\n" not in text and len(text) <= max_width


def display(host, buffer):
  """Show short single line buffer content as transient status message,
  switch to the buffer otherwise. Empty output is announced with
  NO_OUTPUT_MESSAGE, the buffer stays empty. """
  text = buffer.text
  if not text:
    host.show_message(NO_OUTPUT_MESSAGE)

  elif fits_status_line(text):
    host.show_message(text)

  else:
    host.switch_to_buffer(buffer)


def invoke(host, arguments, input_source):
  """
  <Purpose>
    Run the OpenPGP tool with the passed arguments on the passed input source
    and show its output.

    The steps are:
      1. get (or create) the output buffer from the host and clear it,
      2. run `sqview.settings.SQ_COMMAND` with `arguments`, writing the bytes
         of `input_source` to its standard input,
      3. wait for the tool to exit and insert everything it wrote to standard
         output and standard error into the buffer,
      4. delete trailing whitespace at the end of the buffer and mark it
         unmodified,
      5. display the buffer content (see `display`).

    The exit code of the tool is not interpreted. Diagnostics of a failing run
    end up in the buffer like any other output.

  <Arguments>
    host:
            The host editor, a sqview.host.Host instance.

    arguments:
            The arguments for the tool, e.g. ("packet", "dump"). They are
            passed on verbatim and never mutated. (list or tuple of str)

    input_source:
            A sqview.models.InputSource instance, i.e. one of WholeDocument,
            Span or Literal.

  <Exceptions>
    securesystemslib.exceptions.FormatError:
            If `arguments` is not a list or tuple of str.

    sqview.exceptions.InvalidSpanError:
            If a Span input source does not lie within the current document.

    sqview.exceptions.CommandNotFoundError:
            If the tool could not be found or started. Nothing is written to
            the (cleared) output buffer.

  <Side Effects>
    Runs the tool in a subprocess.
    Clears and writes the host's output buffer and updates the host's display.

  <Returns>
    The final content of the output buffer. (str)

  """
  formats.check_str_list(arguments)

  buffer = host.get_buffer_create(sqview.settings.OUTPUT_BUFFER_NAME)
  buffer.erase()
  buffer.set_modified(False)

  # A literal string bypasses the document
  document = None
  if not isinstance(input_source, Literal):
    document = host.document_text()
  input_bytes = input_source.resolve(document)

  cmd = [sqview.settings.SQ_COMMAND] + list(arguments)
  LOG.info("Running '{}' on {} bytes of input".format(" ".join(cmd),
      len(input_bytes)))

  try:
    return_code, output = process.run_merged(cmd, input_bytes,
        merge_stderr=sqview.settings.MERGE_STDERR)

  except OSError as e:
    raise CommandNotFoundError("Cannot run '{}': {}".format(
        sqview.settings.SQ_COMMAND, e)) from e

  LOG.info("'{}' exited with {}".format(" ".join(cmd), return_code))

  buffer.insert(output.decode(OUTPUT_ENCODING, "replace"))
  buffer.delete_trailing_whitespace()
  buffer.set_modified(False)

  display(host, buffer)

  return buffer.text
