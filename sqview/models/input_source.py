"""
<Program Name>
  input_source.py

<Started>
  March 3, 2026

<Purpose>
  Provides the classes that tell the invocation pipeline which bytes to feed
  to the OpenPGP tool:

  - WholeDocument, the full text of the current document,
  - Span, the bytes between two byte offsets of the encoded document,
  - Literal, a string passed directly, without any document.

  Exactly one of them is passed per invocation. All of them provide a
  `resolve` method that returns the UTF-8 encoded bytes for a document.

"""
import attr

import sqview.formats as formats
from sqview.exceptions import InvalidSpanError

ENCODING = "utf-8"
# Bytes that are not valid UTF-8 (e.g. of binary OpenPGP data read with the
# same error handler) are passed through unchanged
ENCODING_ERRORS = "surrogateescape"


class InputSource:
  """Base class for the input source variants. """

  def resolve(self, document):
    """Return the bytes to feed to the tool for the passed document text. """
    raise NotImplementedError # pragma: no cover


@attr.s(frozen=True)
class WholeDocument(InputSource):
  """Use the full current document. """

  def resolve(self, document):
    formats.check_str(document)
    return document.encode(ENCODING, ENCODING_ERRORS)


@attr.s(frozen=True)
class Span(InputSource):
  """
  <Purpose>
    A sub-span of the current document, identified by byte offsets into the
    encoded document. `start` is inclusive and `end` exclusive, as in Python
    slices.

  <Attributes>
    start:
            Offset of the first byte of the span. (int)

    end:
            Offset after the last byte of the span. (int)

  """
  start = attr.ib()
  end = attr.ib()

  @start.validator
  @end.validator
  def _validate_offset(self, attribute, value): # pylint: disable=unused-argument
    formats.check_int(value)


  def resolve(self, document):
    """
    <Purpose>
      Return exactly the bytes between `start` and `end` of the encoded
      `document`. A span may cut a multi-byte character in two.

    <Exceptions>
      sqview.exceptions.InvalidSpanError:
              If the span is decreasing or does not lie within the document.

    """
    formats.check_str(document)
    data = document.encode(ENCODING, ENCODING_ERRORS)

    if not 0 <= self.start <= self.end <= len(data):
      raise InvalidSpanError("Span {}-{} does not lie within the document"
          " ({} bytes)".format(self.start, self.end, len(data)))

    return data[self.start:self.end]


@attr.s(frozen=True)
class Literal(InputSource):
  """A literal string, the document is ignored. """
  text = attr.ib(validator=lambda _, __, value: formats.check_str(value))

  def resolve(self, document=None):
    return self.text.encode(ENCODING, ENCODING_ERRORS)
