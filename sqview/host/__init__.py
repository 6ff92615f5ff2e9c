"""Host editor API.

Interface to the editor that sqview commands run in.

Example usage::

    from sqview.host import ConsoleHost
    from sqview.commands import sq_inspect

    host = ConsoleHost(document=armored_key)
    sq_inspect(host)

Editor integrations subclass ``Host`` (and ``sqview.models.Buffer`` for the
editor's own buffers).

"""

from sqview.host._host import ConsoleHost, Host
