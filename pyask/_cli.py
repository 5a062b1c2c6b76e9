import sys
import argparse

from ._builder import input
from .colours import Colour
from .errors import AskError
from .utils import listen_to_logs


def prompt_char(value):
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"must be a single character, not {value!r}")
    return value


def make_parser():
    colours = [c.name.lower() for c in Colour]
    parser = argparse.ArgumentParser(
        prog="pyask",
        description="Ask the user a question and print the answer to stdout.",
    )
    parser.add_argument("message", nargs="?", default="", help="the question")
    parser.add_argument(
        "--prompt", metavar="CHAR", type=prompt_char, help="character after the message"
    )
    parser.add_argument("--fg", choices=colours, help="colour of the message")
    parser.add_argument("--bg", choices=colours, help="background colour")
    parser.add_argument("--no-echo", action="store_true", help="hide the answer")
    parser.add_argument("--confirm", action="store_true", help="ask 'are you sure?'")
    parser.add_argument("--default", help="answer to use for an empty line")
    parser.add_argument("--version", action="store_true", help="show the version")
    parser.add_argument(
        "--listen", action="store_true", help="print logs forwarded by PYASK_LOG_UDP"
    )
    return parser


def cli(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    args = make_parser().parse_args(argv)

    if args.version:
        from . import __version__

        print("pyask", __version__)
        return 0
    if args.listen:
        try:
            listen_to_logs()
        except KeyboardInterrupt:
            pass
        return 0

    try:
        question = build_question(args)
        answer = question.ask()
    except AskError as err:
        sys.stderr.write(f"\npyask: {err}\n")
        return 1
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        return 130
    print(answer)
    return 0


def build_question(args):
    # The prompt goes to stderr, so that the answer can be captured
    question = input(args.message).redirect_out(sys.stderr)
    if args.prompt is not None:
        question = question.prompt(args.prompt)
    if args.fg:
        question = question.fg_colour(args.fg)
    if args.bg:
        question = question.bg_colour(args.bg)
    if args.no_echo:
        question = question.no_echo()
    if args.confirm:
        question = question.confirm()
    if args.default is not None:
        question = question.default(args.default)
    return question
