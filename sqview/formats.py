"""
<Program Name>
  formats.py

<Started>
  March 3, 2026

<Purpose>
  Helpers to validate API inputs, i.e. the arguments passed to the OpenPGP
  tool and the offsets of document spans.

  The helpers only check types. The content of an argument list is passed on
  to the tool verbatim.

"""
from securesystemslib.exceptions import FormatError


def _err(arg, expected):
  return FormatError("expected {}, got '{} ({})'".format(
      expected, arg, type(arg)))


def check_str(arg):
  if not isinstance(arg, str):
    raise _err(arg, "str")


def check_str_list(arg):
  """Raise FormatError if `arg` is not a list or tuple of str. """
  if not isinstance(arg, (list, tuple)):
    raise _err(arg, "list or tuple")

  for element in arg:
    check_str(element)


def check_int(arg):
  # bool is an int subclass but never a meaningful offset
  if isinstance(arg, bool) or not isinstance(arg, int):
    raise _err(arg, "int")
