"""
<Program Name>
  test_user_settings.py

<Started>
  March 10, 2026

<Purpose>
  Test sqview/user_settings.py

"""
import os
import unittest
import sqview.settings
import sqview.user_settings


class TestUserSettings(unittest.TestCase):
  @classmethod
  def setUpClass(self):
    self.working_dir = os.getcwd()

    # Backup settings to restore them in `tearDownClass`
    self.settings_backup = {}
    for key in dir(sqview.settings):
      self.settings_backup[key] = getattr(sqview.settings, key)

    # We use `rc_test` as test dir because it has an `.sqviewrc`, which
    # is loaded (from CWD) in `user_settings.set_settings` related tests
    self.test_dir = os.path.join(os.path.dirname(__file__), "rc_test")
    os.chdir(self.test_dir)

    os.environ["SQVIEW_SQ_COMMAND"] = "/e/n/v/sq"
    os.environ["SQVIEW_OUTPUT_BUFFER_NAME"] = "*env output*"
    os.environ["SQVIEW_KEY_PREFIX"] = "C-c e"
    os.environ["SQVIEW_MERGE_STDERR"] = "no"
    os.environ["SQVIEW_NOT_WHITELISTED"] = "parsed"
    os.environ["NOT_PARSED"] = "ignored"


  @classmethod
  def tearDownClass(self):
    os.chdir(self.working_dir)

    # Other unittests might depend on defaults:
    # Restore monkey patched settings ...
    for key, val in self.settings_backup.items():
      setattr(sqview.settings, key, val)

    # ... and delete test environment variables
    del os.environ["SQVIEW_SQ_COMMAND"]
    del os.environ["SQVIEW_OUTPUT_BUFFER_NAME"]
    del os.environ["SQVIEW_KEY_PREFIX"]
    del os.environ["SQVIEW_MERGE_STDERR"]
    del os.environ["SQVIEW_NOT_WHITELISTED"]
    del os.environ["NOT_PARSED"]


  def test_get_rc(self):
    """ Test rcfile parsing in CWD. """
    rc_dict = sqview.user_settings.get_rc()

    # Parsed verbatim (no interpolation) and used by `set_settings`
    self.assertEqual(rc_dict["OUTPUT_BUFFER_NAME"], "*rc output*")
    self.assertEqual(rc_dict["STATUS_LINE_MAX_WIDTH"], "20")

    # Parsed but ignored in `set_settings` (not in case sensitive whitelist)
    self.assertEqual(rc_dict["new_rc_setting"], "new rc setting")


  def test_get_env(self):
    """ Test environment variables parsing and prefix. """
    env_dict = sqview.user_settings.get_env()

    self.assertEqual(env_dict["SQ_COMMAND"], "/e/n/v/sq")
    self.assertEqual(env_dict["KEY_PREFIX"], "C-c e")
    self.assertEqual(env_dict["MERGE_STDERR"], "no")

    # Parsed but ignored in `set_settings` (not in whitelist)
    self.assertEqual(env_dict["NOT_WHITELISTED"], "parsed")

    # Not parsed because of missing prefix
    self.assertFalse("NOT_PARSED" in env_dict)


  def test_set_settings(self):
    """ Test precedence of rc over env, conversion and whitelisting. """
    sqview.user_settings.set_settings()

    # From envvars
    self.assertEqual(sqview.settings.SQ_COMMAND, "/e/n/v/sq")
    self.assertEqual(sqview.settings.KEY_PREFIX, "C-c e")

    # From RCfile setting (has precedence over envvar setting)
    self.assertEqual(sqview.settings.OUTPUT_BUFFER_NAME, "*rc output*")

    # Converted to int
    self.assertEqual(sqview.settings.STATUS_LINE_MAX_WIDTH, 20)

    # RCfile value 'maybe' is no bool and overrides the envvar value, so the
    # setting keeps its default
    self.assertTrue(sqview.settings.MERGE_STDERR)

    # Not whitelisted settings are ignored by `set_settings`
    self.assertTrue("new_rc_setting" in sqview.user_settings.get_rc())
    self.assertRaises(AttributeError, getattr, sqview.settings,
        "NEW_RC_SETTING")
    self.assertTrue("NOT_WHITELISTED" in sqview.user_settings.get_env())
    self.assertRaises(AttributeError, getattr, sqview.settings,
        "NOT_WHITELISTED")


  def test_to_bool(self):
    """Test conversion of boolean setting values. """
    for value in ["1", "true", "Yes", "ON"]:
      self.assertTrue(sqview.user_settings._to_bool(value)) # pylint: disable=protected-access

    for value in ["0", "false", "No", "OFF"]:
      self.assertFalse(sqview.user_settings._to_bool(value)) # pylint: disable=protected-access

    with self.assertRaises(ValueError):
      sqview.user_settings._to_bool("maybe") # pylint: disable=protected-access


if __name__ == "__main__":
  unittest.main()
