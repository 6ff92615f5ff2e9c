"""
<Program Name>
  settings.py

<Started>
  March 2, 2026

<Purpose>
  A central place to define default settings that can be used throughout the
  package.

  Defaults can be changed,
   - here (hardcoded),
   - programmatically, e.g.
     ```
     import sqview.settings
     sqview.settings.SQ_COMMAND = "/usr/local/bin/sq"
     ```
  - or, when using sqview via command line tooling, with environment variables
    or RCfiles, see the `sqview.user_settings` module

"""
# The debug setting is used to set the sqview base logger to logging.DEBUG
DEBUG = False

# Name of the OpenPGP tool executable, looked up on PATH unless it contains a
# path separator
SQ_COMMAND = "sq"

# Name of the single scratch buffer shared by all invocations
OUTPUT_BUFFER_NAME = "*sq output*"

# Key chord prefix used by `sqview.keybindings.register_keybindings` if no
# prefix is passed explicitly
KEY_PREFIX = "C-c s"

# Single line output up to this many characters is shown as status message,
# anything longer (or with a line break) is shown in the output buffer
STATUS_LINE_MAX_WIDTH = 80

# Write the tool's standard error into the output buffer together with its
# standard output
MERGE_STDERR = True
