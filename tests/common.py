#!/usr/bin/env python
"""
<Program Name>
  common.py

<Started>
  March 10, 2026

<Purpose>
  Common code for sqview unittests, import like so:
  `import tests.common`

  Tests importing this module, should be run from the project root, e.g.:
  `python -m unittest tests.test_pipeline`
  or using the aggregator script (preferred way):
  `python tests/runtests.py`.

"""
import io
import os
import sys
import shlex
import inspect
import shutil
import tempfile
import unittest
from unittest.mock import patch

import sqview.settings


class TmpDirMixin():
  """Mixin with classmethods to create and change into a temporary directory,
  and to change back to the original CWD and remove the temporary directory.

  """
  @classmethod
  def set_up_test_dir(cls):
    """Back up CWD, and create and change into temporary directory. """
    cls.original_cwd = os.getcwd()
    cls.test_dir = os.path.realpath(tempfile.mkdtemp())
    os.chdir(cls.test_dir)

  @classmethod
  def tear_down_test_dir(cls):
    """Change back to original CWD and remove temporary directory. """
    os.chdir(cls.original_cwd)
    shutil.rmtree(cls.test_dir)


class FakeSqMixin():
  """Mixin with classmethods to install an executable 'sq' stand-in (see
  `tests/scripts/fake_sq.py`) in a temporary directory, point
  `sqview.settings.SQ_COMMAND` at it and restore the setting afterwards.

  """
  fake_sq_script = os.path.join(os.path.dirname(os.path.realpath(__file__)),
      "scripts", "fake_sq.py")

  @classmethod
  def set_up_fake_sq(cls):
    cls.fake_sq_dir = os.path.realpath(tempfile.mkdtemp())
    cls.fake_sq = os.path.join(cls.fake_sq_dir, "sq")

    # A shell wrapper avoids shebang length limits of long interpreter paths
    with io.open(cls.fake_sq, "w") as fp:
      fp.write("#!/bin/sh\nexec {} {} \"$@\"\n".format(
          shlex.quote(sys.executable), shlex.quote(cls.fake_sq_script)))
    os.chmod(cls.fake_sq, 0o755)

    cls.sq_command_backup = sqview.settings.SQ_COMMAND
    sqview.settings.SQ_COMMAND = cls.fake_sq

  @classmethod
  def tear_down_fake_sq(cls):
    sqview.settings.SQ_COMMAND = cls.sq_command_backup
    shutil.rmtree(cls.fake_sq_dir)


class SettingsMixin():
  """Mixin with methods to back up all values of `sqview.settings` and to
  restore them, e.g. in `setUp` and `tearDown` of tests that change settings.

  """
  def back_up_settings(self):
    self.settings_backup = {
      key: getattr(sqview.settings, key)
      for key in dir(sqview.settings) if key.isupper()
    }

  def restore_settings(self):
    for key, val in self.settings_backup.items():
      setattr(sqview.settings, key, val)


class CliTestCase(unittest.TestCase):
  """TestCase subclass providing a test helper that patches sys.argv with
  passed arguments and asserts a SystemExit with a return code equal
  to the passed status argument.

  Subclasses of CliTestCase require a class variable that stores the main
  function of the cli tool to test as staticmethod, e.g.:

  ```
  import tests.common
  from sqview.sqview_cli import main as sqview_main

  class TestSqviewTool(tests.common.CliTestCase):
    cli_main_func = staticmethod(sqview_main)
    ...

  ```
  """
  cli_main_func = None

  def __init__(self, *args, **kwargs):
    """Constructor that checks for the presence of a callable cli_main_func
    class variable. And stores the filename of the module containing that
    function, to be used as first argument when patching sys.argv in
    self.assert_cli_sys_exit.
    """
    if not callable(self.cli_main_func):
      raise Exception("Subclasses of `CliTestCase` need to assign the main"
          " function of the cli tool to test using `staticmethod()`: {}"
          .format(self.__class__.__name__))

    file_path = inspect.getmodule(self.cli_main_func).__file__
    self.file_name = os.path.basename(file_path)

    super(CliTestCase, self).__init__(*args, **kwargs)


  def assert_cli_sys_exit(self, cli_args, status):
    """Test helper to mock command line call and assert return value.
    The passed args does not need to contain the command line tool's name.
    This is assessed from  `self.cli_main_func`
    """
    with patch.object(sys, "argv", [self.file_name]
        + cli_args), self.assertRaises(SystemExit) as raise_ctx:
      self.cli_main_func() # pylint: disable=not-callable

    self.assertEqual(raise_ctx.exception.code, status)
