"""
<Program Name>
  process.py

<Started>
  March 3, 2026

<Purpose>
  Provide a common interface for Python's subprocess module to:

  - sqview namespace subprocess constants (PIPE, STDOUT) and
  - provide a custom `subprocess.run` wrapper, used to run the OpenPGP tool
    on bytes passed to its standard input

"""
import logging
import subprocess

import sqview.formats as formats


# Constants.
PIPE = subprocess.PIPE
STDOUT = subprocess.STDOUT


# Inherits from sqview base logger (c.f. sqview.log)
LOG = logging.getLogger(__name__)


def run(cmd, check=False, **kwargs):
  """
  <Purpose>
    Provide wrapper for `subprocess.run` where:

    * `check` is `False` by default, i.e. the exit code of the command is
      returned but never interpreted, and
    * there is only one positional argument, i.e. `cmd`, which must be a list
      or tuple of str.

    There is no timeout, the call blocks until the command exits.

  <Arguments>
    cmd:
            The command and its arguments. (list or tuple of str)

    check: (default False)
            "If check is true, and the process exits with a non-zero exit code,
            a CalledProcessError exception will be raised."

    **kwargs:
            See subprocess.run and Frequently Used Arguments to Popen
            constructor for available kwargs.
            https://docs.python.org/3/library/subprocess.html#subprocess.run

  <Exceptions>
    securesystemslib.exceptions.FormatError:
            If `cmd` is not a list or tuple of str.

    OSError:
            If the given command is not present or non-executable.

  <Side Effects>
    The side effects of executing the given command in this environment.

  <Returns>
    A subprocess.CompletedProcess instance.

  """
  formats.check_str_list(cmd)
  return subprocess.run(cmd, check=check, **kwargs)


def run_merged(cmd, input_bytes, merge_stderr=True):
  """
  <Purpose>
    Execute a command in a subprocess, feed the passed bytes to its standard
    input and block until it terminates.

    Standard error is written to the same pipe as standard output, so that
    both streams end up in one string in the order the command wrote them. If
    `merge_stderr` is False, standard error is captured separately, logged
    and otherwise dropped.

  <Arguments>
    cmd:
            The command and its arguments. (list or tuple of str)

    input_bytes:
            The bytes written to the command's standard input. (bytes)

    merge_stderr: (default True)
            Whether standard error is part of the returned output.

  <Exceptions>
    securesystemslib.exceptions.FormatError:
            If `cmd` is not a list or tuple of str.

    OSError:
            If the given command is not present or non-executable.

  <Side Effects>
    The side effects of executing the given command in this environment.

  <Returns>
    A tuple of the command's exit code and the captured output as bytes.

  """
  stderr = STDOUT if merge_stderr else PIPE
  proc = run(cmd, input=input_bytes, stdout=PIPE, stderr=stderr)

  if not merge_stderr and proc.stderr:
    LOG.info("'{}' wrote to stderr: {}".format(" ".join(cmd),
        proc.stderr.decode("utf-8", "replace").rstrip()))

  return proc.returncode, proc.stdout
