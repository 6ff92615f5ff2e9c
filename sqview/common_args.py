"""
<Program Name>
  common_args.py

<Started>
  March 8, 2026

<Purpose>
  Provides a collection of constants that can be used as `*args` or `**kwargs`
  to argparse.ArgumentParser.add_argument() for cli tools with common
  command line arguments.

  Example Usage:

  ```
  from sqview.common_args import VERBOSE_ARGS, VERBOSE_KWARGS
  parser = argparse.ArgumentParser()
  parser.add_argument(*VERBOSE_ARGS, **VERBOSE_KWARGS)
  ```

"""
import sys

# Python 3.10 renamed the "optional arguments" group to "options"
if sys.version_info >= (3, 10):
  OPTS_TITLE = "Options"
else: # pragma: no cover
  OPTS_TITLE = "Optional Arguments"

FILE_ARGS = ["-f", "--file"]
FILE_KWARGS = {
  "dest": "file",
  "type": str,
  "metavar": "<path>",
  "help": ("path to the document to pass to 'sq'. If '--file' is not passed,"
           " the document is read from standard input.")
}

START_ARGS = ["--start"]
START_KWARGS = {
  "dest": "start",
  "type": int,
  "metavar": "<offset>",
  "help": ("byte offset of the start of the span of the document to pass"
           " to 'sq'. Requires '--end'.")
}

END_ARGS = ["--end"]
END_KWARGS = {
  "dest": "end",
  "type": int,
  "metavar": "<offset>",
  "help": ("byte offset after the end of the span of the document to"
           " pass to 'sq'. Requires '--start'.")
}

STRING_ARGS = ["-s", "--string"]
STRING_KWARGS = {
  "dest": "string",
  "type": str,
  "metavar": "<string>",
  "help": ("literal string to pass to 'sq' instead of a document. Can't be"
           " used together with '--file', '--start' or '--end'.")
}

VERBOSE_ARGS = ["-v", "--verbose"]
VERBOSE_KWARGS = {
  "dest": "verbose",
  "action": "store_true",
  "help": "show more output"
}

QUIET_ARGS = ["-q", "--quiet"]
QUIET_KWARGS = {
  "dest": "quiet",
  "action": "store_true",
  "help": "suppress all output"
}


def title_case_action_groups(parser):
  """Capitalize the first character of all words in the title of each action
  group of the passed parser.

  This is useful for consistency when using the sphinx argparse extension,
  which title-cases default action groups only.

  """
  for action_group in parser._action_groups: # pylint: disable=protected-access
    action_group.title = action_group.title.title()


def sort_action_groups(parser, title_order=None):
  """Sort action groups of passed parser by their titles according to the
  passed (or a default) order.

  """
  if title_order is None:
    title_order = ["Positional Arguments", "Input Arguments", OPTS_TITLE]

  action_group_dict = {}
  for action_group in parser._action_groups: # pylint: disable=protected-access
    action_group_dict[action_group.title] = action_group

  ordered_action_groups = []
  for title in title_order:
    if title in action_group_dict:
      ordered_action_groups.append(action_group_dict.pop(title))

  # Keep groups with titles that are not in the order at the end
  ordered_action_groups.extend(action_group_dict.values())

  parser._action_groups = ordered_action_groups # pylint: disable=protected-access
