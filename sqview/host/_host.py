"""Host interface and console implementation.

The host is the editor (or any other automation surface) that sqview runs
in. The invocation pipeline and the commands only talk to the host through
the methods of ``Host``, so that the same code serves an editor plugin, the
``sqview`` command line tool and the tests.

"""

import logging
import sys
from abc import ABCMeta, abstractmethod

from sqview.models.buffer import TextBuffer

LOG = logging.getLogger(__name__)


class Host(metaclass=ABCMeta):
    """Editor surface consumed by sqview."""

    @abstractmethod
    def document_text(self):
        """Return the full text of the current document."""
        raise NotImplementedError

    @abstractmethod
    def selection(self):
        """Return ``(start, end)`` byte offsets of the active selection into the
        UTF-8 encoded document, or None if there is no active selection."""
        raise NotImplementedError

    @abstractmethod
    def get_buffer_create(self, name):
        """Return the buffer called ``name``, creating it if absent."""
        raise NotImplementedError

    @abstractmethod
    def switch_to_buffer(self, buffer):
        """Display the passed buffer and give it focus."""
        raise NotImplementedError

    @abstractmethod
    def show_message(self, text):
        """Show a transient one line status message."""
        raise NotImplementedError

    @abstractmethod
    def report_error(self, message):
        """Report a failure through the host's error channel."""
        raise NotImplementedError

    @abstractmethod
    def read_string(self, prompt):
        """Prompt the user for a line of text and return it."""
        raise NotImplementedError

    @abstractmethod
    def bind_key(self, chord, command):
        """Bind ``chord`` globally to ``command``, a callable that takes the
        host as its only argument. Binding a chord again replaces the previous
        command."""
        raise NotImplementedError


class ConsoleHost(Host):
    """Host implementation for terminals.

    The document and the selection (byte offsets, see ``selection``) are
    passed to the constructor. Status messages and displayed buffers are
    printed to ``stdout``, prompts read from ``stdin``. If no streams are
    passed, ``sys.stdout`` and ``sys.stdin`` at the time of use are used.

    Besides implementing the ``Host`` interface, the instance records reported
    errors in ``errors``, shown messages in ``messages``, the last displayed
    buffer in ``current_buffer`` and key bindings in ``keymap``.

    """

    def __init__(self, document="", selection=None, stdout=None, stdin=None):
        if selection is not None:
            start, end = selection
            selection = (start, end)

        self._document = document
        self._selection = selection
        self._stdout = stdout
        self._stdin = stdin
        self._buffers = {}

        self.keymap = {}
        self.errors = []
        self.messages = []
        self.current_buffer = None

    def _out(self):
        return self._stdout if self._stdout is not None else sys.stdout

    def _in(self):
        return self._stdin if self._stdin is not None else sys.stdin

    def document_text(self):
        return self._document

    def selection(self):
        return self._selection

    def get_buffer(self, name):
        """Return the buffer called ``name`` or None."""
        return self._buffers.get(name)

    def get_buffer_create(self, name):
        buffer = self._buffers.get(name)
        if buffer is None:
            LOG.debug("Creating buffer '%s'", name)
            buffer = TextBuffer(name)
            self._buffers[name] = buffer

        return buffer

    def switch_to_buffer(self, buffer):
        self.current_buffer = buffer
        out = self._out()
        out.write(buffer.text + "\n")
        out.flush()

    def show_message(self, text):
        self.messages.append(text)
        out = self._out()
        out.write(text + "\n")
        out.flush()

    def report_error(self, message):
        self.errors.append(message)
        LOG.error(message)

    def read_string(self, prompt):
        out = self._out()
        out.write(prompt)
        out.flush()

        line = self._in().readline()
        if not line:
            raise EOFError("No input for prompt '{}'".format(prompt))

        return line.rstrip("\r\n")

    def bind_key(self, chord, command):
        if chord in self.keymap:
            LOG.debug("Rebinding '%s'", chord)
        self.keymap[chord] = command
