#!/usr/bin/env python
"""
<Program Name>
  sqview_cli.py

<Started>
  March 9, 2026

<Purpose>
  Provides a command line interface for the sqview commands, i.e. runs 'sq'
  on a document (or a span of it, or a literal string) and prints the
  output.

<Return Codes>
  2 if an exception occurred during argument parsing
  1 if an exception occurred
  0 if no exception occurred

"""

import io
import sys
import argparse
import logging

import sqview.user_settings
from sqview import (pipeline, __version__)
from sqview.commands import COMMAND_ARGUMENTS, COMMANDS, split_arguments
from sqview.host import ConsoleHost
from sqview.models.input_source import (Literal, Span, WholeDocument,
    ENCODING, ENCODING_ERRORS)

from sqview.common_args import (FILE_ARGS, FILE_KWARGS, START_ARGS,
    START_KWARGS, END_ARGS, END_KWARGS, STRING_ARGS, STRING_KWARGS,
    VERBOSE_ARGS, VERBOSE_KWARGS, QUIET_ARGS, QUIET_KWARGS,
    sort_action_groups, title_case_action_groups)

# Command line interfaces should use sqview base logger (c.f. sqview.log)
LOG = logging.getLogger("sqview")


def create_parser():
  """Create and return configured ArgumentParser instance. """
  parser = argparse.ArgumentParser(
      formatter_class=argparse.RawDescriptionHelpFormatter,
      description="""
sqview runs the Sequoia OpenPGP tool 'sq' on a document, a span of a document
or a literal string, and prints everything 'sq' writes to standard output and
standard error, with trailing whitespace removed. The exit code of 'sq' is not
interpreted, sqview only fails if 'sq' cannot be run.""")

  parser.usage = ("%(prog)s [optional arguments] <operation>"
      " [-- <sq arguments>]")

  parser.epilog = """EXAMPLE USAGE

Show the packets of a key file.

  {prog} -f key.pgp dump


Show the packets with their raw bytes, reading the key from stdin.

  {prog} hex-dump < key.pgp


Summarize only the first 1200 bytes of an armored file.

  {prog} -f keyring.asc --start 0 --end 1200 inspect


Run any 'sq' subcommand. Arguments are split on whitespace, there is no
quoting.

  {prog} -f key.pgp command -- armor --kind secret-key

""".format(prog=parser.prog)

  parser.add_argument("operation", choices=sorted(COMMANDS),
      metavar="<operation>", help=(
      "one of {}. 'command' runs 'sq' with the arguments that follow"
      " the operation.".format(", ".join(
      "'{}'".format(name) for name in sorted(COMMANDS)))))

  parser.add_argument("arguments", nargs="*", metavar="<sq arguments>",
      help=(
      "arguments for 'sq', only used with the 'command' operation. They are"
      " separated from optional arguments by a double dash '--'."))

  input_args = parser.add_argument_group("input arguments")
  input_args.add_argument(*FILE_ARGS, **FILE_KWARGS)
  input_args.add_argument(*START_ARGS, **START_KWARGS)
  input_args.add_argument(*END_ARGS, **END_KWARGS)
  input_args.add_argument(*STRING_ARGS, **STRING_KWARGS)

  verbosity_args = parser.add_mutually_exclusive_group(required=False)
  verbosity_args.add_argument(*VERBOSE_ARGS, **VERBOSE_KWARGS)
  verbosity_args.add_argument(*QUIET_ARGS, **QUIET_KWARGS)

  parser.add_argument('--version', action='version',
                      version='{} {}'.format(parser.prog, __version__))

  title_case_action_groups(parser)
  sort_action_groups(parser)

  return parser


def _check_args(parser, args):
  """Fail with usage message on conflicting or missing arguments. """
  if args.string is not None and (args.file is not None or
      args.start is not None or args.end is not None):
    parser.print_usage()
    parser.error("'--string' can't be used with '--file', '--start' or"
        " '--end'")

  if (args.start is None) != (args.end is None):
    parser.print_usage()
    parser.error("Specify both '--start <offset>' and '--end <offset>'")

  if args.operation == "command" and not args.arguments:
    parser.print_usage()
    parser.error("No arguments for 'sq' specified")

  if args.operation != "command" and args.arguments:
    parser.print_usage()
    parser.error("'{}' takes no arguments for 'sq', use 'command'".format(
        args.operation))


def _read_document(path):
  """Read document from path, or from stdin if path is None. """
  if path is None:
    # Replaced stdin streams (e.g. in tests) may lack the binary buffer
    if not hasattr(sys.stdin, "buffer"):
      return sys.stdin.read()

    stream = io.TextIOWrapper(sys.stdin.buffer, encoding=ENCODING,
        errors=ENCODING_ERRORS, newline="")
    return stream.read()

  with io.open(path, "r", encoding=ENCODING, errors=ENCODING_ERRORS,
      newline="") as fp:
    return fp.read()


def main():
  """Parse arguments, read the document and run 'sq' through the invocation
  pipeline, printing the output. """
  parser = create_parser()
  args = parser.parse_args()

  LOG.setLevelVerboseOrQuiet(args.verbose, args.quiet)

  # Override defaults in settings.py with environment variables and RCfiles
  sqview.user_settings.set_settings()

  _check_args(parser, args)

  if args.operation == "command":
    sq_arguments = split_arguments(" ".join(args.arguments))

  else:
    sq_arguments = COMMAND_ARGUMENTS[args.operation]

  try:
    if args.string is not None:
      host = ConsoleHost()
      input_source = Literal(args.string)

    else:
      document = _read_document(args.file)
      selection = None
      input_source = WholeDocument()
      if args.start is not None:
        selection = (args.start, args.end)
        input_source = Span(args.start, args.end)

      host = ConsoleHost(document=document, selection=selection)

    pipeline.invoke(host, sq_arguments, input_source)

  except Exception as e: # pylint: disable=broad-except
    LOG.error("(sqview) {0}: {1}".format(type(e).__name__, e))
    sys.exit(1)

  sys.exit(0)


if __name__ == "__main__":
  main()
