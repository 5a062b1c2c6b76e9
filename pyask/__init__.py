"""
pyask - a small builder for asking the user for input on the terminal.
"""

from . import utils  # noqa - sets up logging
from ._builder import input, PromptBuilder, PromptConfig  # noqa
from .colours import Colour, paint  # noqa
from .errors import AskError, ValidationError  # noqa
from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))
