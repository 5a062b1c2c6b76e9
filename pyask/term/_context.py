import sys
import logging

from ..errors import AskError


logger = logging.getLogger("pyask")


def is_tty(stream):
    """Get whether the given stream is backed by a terminal."""
    try:
        return stream.isatty() and stream.fileno() >= 0
    except (AttributeError, ValueError, OSError):
        # Closed, or a file-like object without a real file descriptor
        return False


class EchoContext:
    """Context manager that disables echo on the terminal of the given stdin.

    Instantiating this class produces a class corresponding with the
    current platform.
    """

    def __new__(cls, **kwargs):
        # Select context class
        if sys.platform.startswith("win"):
            from ._context_windows import WindowsEchoContext as EchoContext
        else:
            from ._context_unix import UnixEchoContext as EchoContext
        return super().__new__(EchoContext)

    def __init__(self, stdin=None):
        self._entered = False
        stdin = stdin or sys.__stdin__
        try:
            self.fd_in = stdin.fileno()
        except (AttributeError, ValueError, OSError) as err:
            raise AskError(f"Input has no file descriptor: {stdin!r}") from err

    def __enter__(self):
        if self._entered:
            raise RuntimeError("Can only enter the echo context once.")
        self._store_terminal_mode()
        self._entered = True
        try:
            self._set_terminal_mode()
        except BaseException:
            # Do not leave the terminal half-changed
            self._entered = False
            try:
                self._reset_terminal_mode()
            except AskError as err:
                # Keep the error from setting the mode
                logger.error(f"Could not restore echo: {err}")
            raise
        logger.debug(f"echo disabled on fd {self.fd_in}")
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self._entered = False
        try:
            self.reset()
        except AskError as err:
            if exc_value is None:
                raise
            # Don't mask the error that got us here
            logger.error(f"Could not restore echo: {err}")
        else:
            logger.debug(f"echo restored on fd {self.fd_in}")

    def reset(self):
        """Reset the terminal to the mode it had when the context was entered."""
        self._reset_terminal_mode()

    # For subclasses to implement

    def _store_terminal_mode(self):
        raise NotImplementedError()

    def _set_terminal_mode(self):
        raise NotImplementedError()

    def _reset_terminal_mode(self):
        raise NotImplementedError()
