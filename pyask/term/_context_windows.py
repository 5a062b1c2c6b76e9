import msvcrt
import ctypes
from ctypes import wintypes

from ..errors import AskError
from ._context import EchoContext


KERNEL32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore

ENABLE_ECHO_INPUT = 0x0004


def get_console_mode(fd) -> int:
    """Get the console mode for a given file descriptor."""
    windows_filehandle = msvcrt.get_osfhandle(fd)  # type: ignore
    mode = wintypes.DWORD()
    if not KERNEL32.GetConsoleMode(windows_filehandle, ctypes.byref(mode)):
        raise ctypes.WinError(ctypes.get_last_error())  # type: ignore
    return mode.value


def set_console_mode(fd, mode: int):
    """Set the console mode for a given file descriptor."""
    windows_filehandle = msvcrt.get_osfhandle(fd)  # type: ignore
    if not KERNEL32.SetConsoleMode(windows_filehandle, mode):
        raise ctypes.WinError(ctypes.get_last_error())  # type: ignore


class WindowsEchoContext(EchoContext):

    def __init__(self, **kwargs):
        self._ori_mode_in = None
        super().__init__(**kwargs)

    def _store_terminal_mode(self):
        try:
            self._ori_mode_in = get_console_mode(self.fd_in)
        except OSError as err:
            raise AskError(f"Unable to get console mode: {err}") from err

    def _set_terminal_mode(self):
        try:
            set_console_mode(self.fd_in, self._ori_mode_in & ~ENABLE_ECHO_INPUT)
        except OSError as err:
            raise AskError(f"Unable to disable echo: {err}") from err

    def _reset_terminal_mode(self):
        if self._ori_mode_in is None:
            return
        ori_mode_in, self._ori_mode_in = self._ori_mode_in, None
        try:
            set_console_mode(self.fd_in, ori_mode_in)
        except OSError as err:
            raise AskError(f"Unable to restore echo: {err}") from err
