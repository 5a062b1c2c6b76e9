"""
Utilities to control terminal echo.

Hiding what the user types (e.g. for a password) means changing a terminal
attribute that is shared by the whole process. On Unix that's the ECHO flag
in termios, on Windows it's the ENABLE_ECHO_INPUT bit of the console mode.
The EchoContext stores the current mode when entered, and restores it on
exit, no matter how the block is left.
"""

from ._context import EchoContext, is_tty  # noqa
