"""
<Program Name>
  buffer.py

<Started>
  March 4, 2026

<Purpose>
  Provides the `Buffer` interface, i.e. the operations the invocation pipeline
  needs from a named scratch buffer of the host editor, and `TextBuffer`, an
  in-memory implementation used by `sqview.host.ConsoleHost`.

  Editor hosts that have their own buffer type wrap it in a `Buffer`
  subclass.

"""
from abc import ABCMeta, abstractmethod

import attr

import sqview.formats as formats


class Buffer(metaclass=ABCMeta):
  """Named text container of the host, into which the output of the OpenPGP
  tool is written. """

  @property
  @abstractmethod
  def name(self):
    """The name by which the host looks up the buffer. """
    raise NotImplementedError

  @property
  @abstractmethod
  def text(self):
    """The current content of the buffer. """
    raise NotImplementedError

  @property
  @abstractmethod
  def modified(self):
    """Whether the host would ask to save the buffer. """
    raise NotImplementedError

  @abstractmethod
  def erase(self):
    """Remove all content. """
    raise NotImplementedError

  @abstractmethod
  def insert(self, text):
    """Append text at the end. """
    raise NotImplementedError

  @abstractmethod
  def set_modified(self, flag):
    raise NotImplementedError

  def delete_trailing_whitespace(self):
    """Remove whitespace from the end of the content.

    Whitespace inside the content, including trailing whitespace of inner
    lines, is kept. """
    stripped = self.text.rstrip()
    if stripped != self.text:
      self.erase()
      self.insert(stripped)


@attr.s(repr=False, init=False)
class TextBuffer(Buffer):
  """
  <Purpose>
    Buffer kept in memory.

  <Attributes>
    name:
            The buffer name, e.g. "*sq output*". (str)

    text:
            The buffer content. (str)

    modified:
            True if the content changed since the buffer was last marked
            unmodified. (bool)

  """
  _name = attr.ib()
  _text = attr.ib()
  _modified = attr.ib()

  def __init__(self, name, text="", modified=False):
    formats.check_str(name)
    formats.check_str(text)
    self._name = name
    self._text = text
    self._modified = modified

  def __repr__(self):
    return "TextBuffer({!r}, {} chars{})".format(self._name, len(self._text),
        ", modified" if self._modified else "")

  @property
  def name(self):
    return self._name

  @property
  def text(self):
    return self._text

  @property
  def modified(self):
    return self._modified

  def erase(self):
    self._text = ""
    self._modified = True

  def insert(self, text):
    formats.check_str(text)
    self._text += text
    self._modified = True

  def set_modified(self, flag):
    self._modified = bool(flag)
