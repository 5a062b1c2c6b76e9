"""
The prompt builder.

A question is configured through a chain of calls, each returning a new
builder, and then asked with ``ask()``:

    name = pyask.input("Name").prompt(":").fg_colour("green").ask()
    password = pyask.input("Password").prompt(":").no_echo().ask()

The builder never holds on to a terminal resource. Echo is only touched
for the duration of the read in ``ask()``.
"""

import sys
import logging
import dataclasses
from typing import Any, Callable, Optional

from .colours import Colour, paint
from .errors import AskError, ValidationError
from .term import EchoContext, is_tty


logger = logging.getLogger("pyask")

CONFIRM_TEXT = "Are you sure? Y/N "


@dataclasses.dataclass(frozen=True)
class PromptConfig:
    """The configuration of a single question."""

    message: Any = ""
    suffix: Optional[str] = None
    fg_colour: Optional[Colour] = None
    bg_colour: Optional[Colour] = None
    echo: bool = True
    confirm: bool = False
    default: Optional[str] = None
    validator: Optional[Callable[[str], bool]] = None
    discard: bool = False
    stdin: Any = None
    stdout: Any = None


class PromptBuilder:
    """Builder for a question to the user. Use ``pyask.input()`` to create one."""

    def __init__(self, config):
        self._config = config

    def __repr__(self):
        return f"<PromptBuilder {str(self._config.message)!r}>"

    @property
    def config(self):
        """The (immutable) PromptConfig of this builder."""
        return self._config

    def _replace(self, **changes):
        return PromptBuilder(dataclasses.replace(self._config, **changes))

    # Configuration

    def prompt(self, char):
        """Set the character that is shown after the message."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"The prompt must be a single character, not {char!r}.")
        return self._replace(suffix=char)

    def fg_colour(self, colour):
        """Set the colour of the message text."""
        return self._replace(fg_colour=Colour.parse(colour))

    def bg_colour(self, colour):
        """Set the background colour of the message."""
        return self._replace(bg_colour=Colour.parse(colour))

    def no_echo(self):
        """Don't show what the user types, e.g. for passwords."""
        return self._replace(echo=False)

    def confirm(self):
        """Ask "are you sure?" after the answer, and repeat until the user says yes."""
        return self._replace(confirm=True)

    def default(self, text):
        """Set the answer to use when the user enters an empty line.

        Use None to unset it again.
        """
        return self._replace(default=None if text is None else str(text))

    def validate(self, func):
        """Set a function that accepts (truthy) or rejects (falsy) the answer."""
        if not callable(func):
            raise TypeError(f"The validator must be callable, not {func!r}.")
        return self._replace(validator=func)

    def no_answer(self):
        """Read the answer, but have ``ask()`` return an empty string."""
        return self._replace(discard=True)

    def redirect_in(self, file):
        """Read from the given text stream instead of stdin."""
        return self._replace(stdin=file)

    def redirect_out(self, file):
        """Write to the given text stream instead of stdout."""
        return self._replace(stdout=file)

    # Execution

    def render(self):
        """Get the prompt text, including escape codes, as written by ``ask()``."""
        config = self._config
        text = str(config.message)
        if config.suffix is not None:
            text += config.suffix
        return paint(text, config.fg_colour, config.bg_colour)

    def ask(self):
        """Show the prompt, and read a line of text from the user.

        Returns the answer without the trailing newline. Raises AskError
        when reading fails, the input is closed, or echo could not be
        changed.
        """
        config = self._config
        stdin = sys.stdin if config.stdin is None else config.stdin
        stdout = sys.stdout if config.stdout is None else config.stdout
        if stdin is None:
            raise AskError("There is no stdin to read from.")

        while True:
            answer = self._ask_once(stdin, stdout)
            if not config.confirm or self._is_confirmed(stdin, stdout):
                break

        if config.validator is not None and not config.validator(answer):
            raise ValidationError(answer)
        if config.discard:
            return ""
        return answer

    def _ask_once(self, stdin, stdout):
        config = self._config
        self._write(stdout, self.render())
        if config.echo:
            answer = self._read_line(stdin)
        elif is_tty(stdin):
            with EchoContext(stdin=stdin):
                answer = self._read_line(stdin)
            # The newline typed by the user was not echoed either
            self._write(stdout, "\n")
        else:
            # Not a terminal, so there is no echo to disable
            logger.debug("input is not a tty, reading without changing echo")
            answer = self._read_line(stdin)
        if not answer and config.default is not None:
            answer = config.default
        return answer

    def _is_confirmed(self, stdin, stdout):
        config = self._config
        self._write(stdout, paint(CONFIRM_TEXT, config.fg_colour, config.bg_colour))
        return self._read_line(stdin).strip() in ("y", "Y")

    def _write(self, stdout, text):
        if stdout is None:
            return
        try:
            stdout.write(text)
            stdout.flush()
        except (OSError, ValueError) as err:
            raise AskError(f"Unable to write prompt: {err}") from err

    def _read_line(self, stdin):
        try:
            line = stdin.readline()
        except (OSError, ValueError) as err:
            # ValueError is what a closed file gives
            raise AskError(f"Unable to read input: {err}") from err
        if not line:
            raise AskError("Unable to read input: the stream is closed.")
        logger.debug(f"read a line of {len(line)} chars")
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line


def input(message=""):
    """Start a question to the user, with the given message.

    The message can be any object; it is converted with ``str()`` when the
    question is asked.
    """
    return PromptBuilder(PromptConfig(message=message))
