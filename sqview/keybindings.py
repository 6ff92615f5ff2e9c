"""
<Program Name>
  keybindings.py

<Started>
  March 6, 2026

<Purpose>
  Binds the sqview commands to key chords of the host.

  Nothing is bound on import. The host integration calls
  `register_keybindings` once at setup time; calling it again (e.g. with
  another prefix) binds the commands anew.

  Example:

  ```
  from sqview.keybindings import register_keybindings
  register_keybindings(host)            # "C-c s d" -> sq_dump, ...
  register_keybindings(host, "C-c p")   # "C-c p d" -> sq_dump, ...
  ```

"""
import logging

import sqview.settings
from sqview.commands import (sq_dump, sq_hex_dump, sq_mpi_dump, sq_inspect,
    sq_command)
from sqview.exceptions import KeyBindingError

# Inherits from sqview base logger (c.f. sqview.log)
LOG = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "C-c s"

KEY_SUFFIXES = {
  "d": sq_dump,
  "h": sq_hex_dump,
  "m": sq_mpi_dump,
  "i": sq_inspect,
  "c": sq_command,
}


def _get_prefix(prefix):
  if prefix is None:
    prefix = sqview.settings.KEY_PREFIX or DEFAULT_KEY_PREFIX

  if not isinstance(prefix, str) or not prefix.strip():
    raise KeyBindingError("Key prefix must be a non-empty string, got"
        " '{}'".format(prefix))

  return prefix.strip()


def keymap(prefix=None):
  """Return dict of key chords to commands for the passed prefix (default:
  sqview.settings.KEY_PREFIX). """
  prefix = _get_prefix(prefix)
  return {
    "{} {}".format(prefix, suffix): command
    for suffix, command in KEY_SUFFIXES.items()
  }


def register_keybindings(host, prefix=None):
  """
  <Purpose>
    Bind all sqview commands on the host, using the passed key prefix followed
    by the suffixes in KEY_SUFFIXES.

  <Arguments>
    host:
            The host editor, a sqview.host.Host instance.

    prefix: (optional)
            The key chord prefix, e.g. "C-c s". Defaults to
            sqview.settings.KEY_PREFIX.

  <Exceptions>
    sqview.exceptions.KeyBindingError:
            If the prefix is not a non-empty string.

  <Side Effects>
    Binds key chords on the host.

  <Returns>
    The dict of bound key chords to commands.

  """
  bindings = keymap(prefix)
  for chord, command in bindings.items():
    LOG.info("Binding '{}' to '{}'".format(chord, command.__name__))
    host.bind_key(chord, command)

  return bindings
