import tty  # Unix
import termios  # Unix

from ..errors import AskError
from ._context import EchoContext


def patch_lflag(attrs: int) -> int:
    # Keep ICANON, so the terminal still does line editing for us
    return attrs & ~termios.ECHO


class UnixEchoContext(EchoContext):

    def __init__(self, **kwargs):
        self._ori_term_attr = None
        super().__init__(**kwargs)

    def _store_terminal_mode(self):
        try:
            self._ori_term_attr = termios.tcgetattr(self.fd_in)
        except termios.error as err:
            raise AskError(f"Unable to get terminal mode: {err}") from err

    def _set_terminal_mode(self):
        newattr = list(self._ori_term_attr)
        newattr[tty.CC] = list(newattr[tty.CC])
        newattr[tty.LFLAG] = patch_lflag(newattr[tty.LFLAG])
        try:
            # TCSANOW rather than TCSAFLUSH, so type-ahead is not discarded
            termios.tcsetattr(self.fd_in, termios.TCSANOW, newattr)
        except termios.error as err:
            raise AskError(f"Unable to disable echo: {err}") from err

    def _reset_terminal_mode(self):
        if self._ori_term_attr is None:
            return
        ori_term_attr, self._ori_term_attr = self._ori_term_attr, None
        try:
            termios.tcsetattr(self.fd_in, termios.TCSANOW, ori_term_attr)
        except termios.error as err:
            raise AskError(f"Unable to restore echo: {err}") from err
