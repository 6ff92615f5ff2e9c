"""
<Program Name>
  user_settings.py

<Started>
  March 7, 2026

<Purpose>
  Provides methods to parse environment variables (`get_env`) and RCfiles
  (`get_rc`) and to override default settings (`set_settings`) defined in the
  `sqview.settings` module.

  Check out the respective docstrings to learn about the requirements for
  environment variables and RCfiles (includes examples).

"""
import os
import logging
import configparser

import sqview.settings

# Inherits from sqview base logger (c.f. sqview.log)
LOG = logging.getLogger(__name__)


USER_PATH = os.path.expanduser("~")

# Prefix required by environment variables to be considered as sqview settings
ENV_PREFIX = "SQVIEW_"

# List of considered rcfile paths in the order they get parsed and overridden,
# i.e. the same setting in `/etc/sqview/config` and `.sqviewrc` (cwd) uses
# the latter
RC_PATHS = [
  os.path.join("/etc", "sqview", "config"),
  os.path.join(USER_PATH, ".config", "sqview", "config"),
  os.path.join(USER_PATH, ".sqviewrc"),
  ".sqviewrc"
]

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def _to_bool(value):
  if value.lower() in TRUE_VALUES:
    return True

  if value.lower() in FALSE_VALUES:
    return False

  raise ValueError("expected one of {}, got '{}'".format(
      ", ".join(TRUE_VALUES + FALSE_VALUES), value))


# Settings, for which defaults exist in `settings.py`, and the functions to
# convert their string values from envvars or rcfiles
SQVIEW_SETTINGS = {
  "SQ_COMMAND": str,
  "OUTPUT_BUFFER_NAME": str,
  "KEY_PREFIX": str,
  "STATUS_LINE_MAX_WIDTH": int,
  "MERGE_STDERR": _to_bool,
}


def get_env():
  """
  <Purpose>
    Parse environment for variables with prefix `ENV_PREFIX` and return
    a dict of key-value pairs.

    The prefix `ENV_PREFIX` is stripped from the keys in the returned dict.

    Example:

    ```
    # Exporting variables in e.g. bash
    export SQVIEW_SQ_COMMAND='/opt/sequoia/bin/sq'
    export SQVIEW_KEY_PREFIX='C-c p'
    ```

    produces

    ```
    {
      "SQ_COMMAND": "/opt/sequoia/bin/sq",
      "KEY_PREFIX": "C-c p"
    }
    ```

  <Exceptions>
    None.

  <Side Effects>
    None.

  <Returns>
    A dictionary containing the parsed key-value pairs.

  """
  env_dict = {}

  for name, value in os.environ.items():
    if (name.startswith(ENV_PREFIX) and
        len(name) > len(ENV_PREFIX)):
      stripped_name = name[len(ENV_PREFIX):]

      env_dict[stripped_name] = value

  return env_dict


def get_rc():
  """
  <Purpose>
    Reads RCfiles from the paths defined in `RC_PATHS` and returns
    a dictionary with all parsed key-value pairs.

    The RCfile format is as expected by Python's builtin `ConfigParser`.

    Section titles in RCfiles are ignored when parsing the key-value pairs.
    However, there has to be at least one section defined.

    The paths in `RC_PATHS` are ordered in reverse precedence, i.e. each file's
    settings override a previous file's settings, e.g. a setting defined
    in `.sqviewrc` (in the current working dir) overrides the same
    setting defined in `~/.sqviewrc` (in the user's home dir) and so on ...

    Example:

    ```
    # E.g. file `.sqviewrc` in current working directory
    [sqview]
    SQ_COMMAND = /opt/sequoia/bin/sq
    STATUS_LINE_MAX_WIDTH = 120
    ```

    produces

    ```
    {
      "SQ_COMMAND": "/opt/sequoia/bin/sq",
      "STATUS_LINE_MAX_WIDTH": "120"
    }
    ```

  <Exceptions>
    None.

  <Side Effects>
    Calls function to read files from disk.

  <Returns>
    A dictionary containing the parsed key-value pairs.

  """
  rc_dict = {}

  # Disable interpolation, buffer names like "*sq output*" are taken verbatim
  config = configparser.ConfigParser(interpolation=None)
  # Reset `optionxform`'s default case conversion to enable case-sensitivity
  config.optionxform = str
  config.read(RC_PATHS)

  for section in config.sections():
    for name, value in config.items(section):
      rc_dict[name] = value

  return rc_dict


def set_settings():
  """
  <Purpose>
    Calls functions that read sqview related environment variables and RCfiles
    and overrides variables in `settings.py` with the retrieved values, if they
    are listed in `SQVIEW_SETTINGS`.

    Settings defined in RCfiles take precedence over settings defined in
    environment variables.

    Values that cannot be converted to the type of the setting are ignored
    with a warning.

  <Exceptions>
    None.

  <Side Effects>
    Calls functions that read environment variables and files from disk.

  <Returns>
    None.

  """
  user_settings = get_env()
  user_settings.update(get_rc())

  # If the user has specified one of the settings in SQVIEW_SETTINGS per envvar
  # or rcfile, override the item in `settings.py`
  for setting, convert in SQVIEW_SETTINGS.items():
    user_setting = user_settings.get(setting)
    if user_setting:
      try:
        value = convert(user_setting)

      except ValueError as e:
        LOG.warning("Ignoring setting (user): {0}={1} ({2})".format(
            setting, user_setting, e))
        continue

      LOG.info("Setting (user): {0}={1}".format(setting, value))
      setattr(sqview.settings, setting, value)

    else:
      default_setting = getattr(sqview.settings, setting)
      LOG.info("Setting (default): {0}={1}".format(
          setting, default_setting))
