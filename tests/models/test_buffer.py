#!/usr/bin/env python
"""
<Program Name>
  test_buffer.py

<Started>
  March 11, 2026

<Purpose>
  Test TextBuffer.

"""
import unittest

from securesystemslib.exceptions import FormatError

from sqview.models import Buffer, TextBuffer


class TestTextBuffer(unittest.TestCase):
  """Test in-memory buffer. """

  def test_init(self):
    buffer = TextBuffer("*sq output*")
    self.assertIsInstance(buffer, Buffer)
    self.assertEqual(buffer.name, "*sq output*")
    self.assertEqual(buffer.text, "")
    self.assertFalse(buffer.modified)

    with self.assertRaises(FormatError):
      TextBuffer(None)

  def test_erase_insert_modified(self):
    """Test content changes mark the buffer modified. """
    buffer = TextBuffer("b", "old content")
    buffer.erase()
    self.assertEqual(buffer.text, "")
    self.assertTrue(buffer.modified)

    buffer.set_modified(False)
    buffer.insert("foo")
    buffer.insert("bar")
    self.assertEqual(buffer.text, "foobar")
    self.assertTrue(buffer.modified)

    with self.assertRaises(FormatError):
      buffer.insert(b"baz")

  def test_delete_trailing_whitespace(self):
    """Test only whitespace at the end is removed. """
    buffer = TextBuffer("b", "  line one  \n\tline two \n \t\n\n")
    buffer.delete_trailing_whitespace()
    self.assertEqual(buffer.text, "  line one  \n\tline two")

    buffer = TextBuffer("b", "  \n\t")
    buffer.delete_trailing_whitespace()
    self.assertEqual(buffer.text, "")

  def test_repr(self):
    self.assertEqual(repr(TextBuffer("b", "abc", True)),
        "TextBuffer('b', 3 chars, modified)")


if __name__ == "__main__":
  unittest.main()
