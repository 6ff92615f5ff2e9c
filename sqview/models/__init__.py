"""Input sources and buffers passed to the invocation pipeline.

Example usage::

    from sqview.models import Span, TextBuffer

    source = Span(0, 42)
    data = source.resolve(document_text)

"""
from sqview.models.buffer import Buffer, TextBuffer
from sqview.models.input_source import InputSource, Literal, Span, WholeDocument
