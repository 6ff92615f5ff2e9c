"""
<Program Name>
  exceptions.py

<Started>
  March 2, 2026

<Purpose>
  Define Exceptions used in sqview. Following the practice from
  securesystemslib the names chosen for exception classes end in 'Error'.

  A non-zero exit of the OpenPGP tool is not an error for sqview, whatever the
  tool wrote is shown like any other output.

"""
from securesystemslib.exceptions import Error, FormatError # pylint: disable=unused-import

class CommandNotFoundError(Error):
  """Indicates that the OpenPGP tool could not be found or started. """

class InvalidSpanError(Error):
  """Indicates that a span does not lie within the document or that its end
  lies before its start. """

class KeyBindingError(Error):
  """Indicates that key bindings could not be built from the passed
  prefix. """

class EmptyCommandError(Error):
  """Indicates that a free-form command has no arguments. """
