import io

import pytest

import pyask
from pyask import Colour, AskError, ValidationError


MSG = "A test message."
DEFAULT_RESPONSE = "A response."


def mock_input(text="A response.\n"):
    return io.StringIO(text)


def ask(builder, text="A response.\n"):
    out = io.StringIO()
    answer = builder.redirect_in(mock_input(text)).redirect_out(out).ask()
    return answer, out.getvalue()


class Message:
    def __str__(self):
        return "Test Message"


def test_can_ask_a_question():
    answer, written = ask(pyask.input(MSG))
    assert answer == DEFAULT_RESPONSE
    assert written == MSG


def test_answer_without_newline():
    answer, _ = ask(pyask.input(MSG), "A response.")
    assert answer == DEFAULT_RESPONSE


def test_trailing_newline_is_stripped():
    assert ask(pyask.input(MSG), "hello\n")[0] == "hello"
    assert ask(pyask.input(MSG), "hello\r\n")[0] == "hello"
    # Only the line ending, not other whitespace
    assert ask(pyask.input(MSG), "  hello \n")[0] == "  hello "


def test_only_one_line_is_read():
    stdin = mock_input("first\nsecond\n")
    builder = pyask.input(MSG).redirect_in(stdin).redirect_out(io.StringIO())
    assert builder.ask() == "first"
    assert builder.ask() == "second"


def test_empty_line_gives_empty_string():
    answer, _ = ask(pyask.input(MSG), "\n")
    assert answer == ""


def test_closed_stream_raises():
    with pytest.raises(AskError):
        ask(pyask.input(MSG), "")

    # AskError is an IOError
    with pytest.raises(IOError):
        ask(pyask.input(MSG), "")

    stdin = mock_input()
    stdin.close()
    builder = pyask.input(MSG).redirect_in(stdin).redirect_out(io.StringIO())
    with pytest.raises(AskError):
        builder.ask()


def test_read_error_raises():
    class BrokenStdin:
        def isatty(self):
            return False

        def readline(self):
            raise OSError("broken")

    builder = pyask.input(MSG).redirect_in(BrokenStdin()).redirect_out(io.StringIO())
    with pytest.raises(AskError) as info:
        builder.ask()
    assert isinstance(info.value.__cause__, OSError)


def test_can_set_prompt():
    for char in ":?>$":
        answer, written = ask(pyask.input(MSG).prompt(char))
        assert answer == DEFAULT_RESPONSE
        assert written == MSG + char
        assert pyask.input(MSG).prompt(char).render() == MSG + char

    assert pyask.input(MSG).render() == MSG


def test_prompt_must_be_a_single_char():
    for char in ["", "::", None, 3]:
        with pytest.raises(ValueError):
            pyask.input(MSG).prompt(char)


def test_can_set_fg_colour():
    answer, written = ask(pyask.input(MSG).prompt(":").fg_colour(Colour.RED))
    assert answer == DEFAULT_RESPONSE
    assert written == "\x1b[31m" + MSG + ":\x1b[0m"

    # By name
    builder = pyask.input(MSG).fg_colour("green")
    assert builder.config.fg_colour is Colour.GREEN
    assert builder.render() == "\x1b[32m" + MSG + "\x1b[0m"


def test_can_set_bg_colour():
    answer, written = ask(pyask.input(MSG).bg_colour(Colour.BLUE))
    assert answer == DEFAULT_RESPONSE
    assert written == "\x1b[44m" + MSG + "\x1b[0m"

    builder = pyask.input(MSG).fg_colour("white").bg_colour("red")
    assert builder.render() == "\x1b[37;41m" + MSG + "\x1b[0m"


def test_colour_does_not_change_the_answer():
    for colour in Colour:
        answer, _ = ask(pyask.input(MSG).fg_colour(colour).bg_colour(colour))
        assert answer == DEFAULT_RESPONSE


def test_invalid_colour():
    with pytest.raises(ValueError):
        pyask.input(MSG).fg_colour("chartreuse")


def test_builder_calls_return_new_builders():
    b1 = pyask.input(MSG)
    b2 = b1.prompt(":")
    b3 = b2.no_echo()
    assert b1 is not b2 and b2 is not b3
    assert b1.config.suffix is None
    assert b2.config.suffix == ":" and b2.config.echo
    assert b3.config.suffix == ":" and not b3.config.echo

    with pytest.raises(AttributeError):
        b3.config.echo = True


def test_defaults():
    config = pyask.input(MSG).config
    assert config.message == MSG
    assert config.suffix is None
    assert config.fg_colour is None
    assert config.bg_colour is None
    assert config.echo is True
    assert config.confirm is False
    assert config.default is None


def test_no_echo_on_non_tty_just_reads():
    answer, written = ask(pyask.input(MSG).no_echo(), "A response.\r\n")
    assert answer == DEFAULT_RESPONSE
    assert written == MSG


def test_can_disable_answer():
    answer, _ = ask(pyask.input(MSG).no_answer())
    assert answer == ""


def test_can_set_default():
    answer, _ = ask(pyask.input(MSG).default("yes"), "\n")
    assert answer == "yes"

    answer, _ = ask(pyask.input(MSG).default("yes"), "no\n")
    assert answer == "no"

    # A closed stream is not an empty answer
    with pytest.raises(AskError):
        ask(pyask.input(MSG).default("yes"), "")

    # None unsets the default
    builder = pyask.input(MSG).default("yes").default(None)
    assert builder.config.default is None
    assert ask(builder, "\n")[0] == ""

    # Other values are converted to str
    assert pyask.input(MSG).default(3).config.default == "3"


def test_can_ask_for_confirmation():
    answer, written = ask(pyask.input(MSG).prompt(":").confirm(), "first\nn\nsecond\ny\n")
    assert answer == "second"
    assert written == (MSG + ":" + pyask._builder.CONFIRM_TEXT) * 2

    answer, _ = ask(pyask.input(MSG).confirm(), "first\nY\n")
    assert answer == "first"

    answer, _ = ask(pyask.input(MSG).confirm().no_answer(), "first\ny\n")
    assert answer == ""

    # Running out of input while confirming
    with pytest.raises(AskError):
        ask(pyask.input(MSG).confirm(), "first\nn\n")


def test_can_validate_answer():
    def valid(a):
        return a == DEFAULT_RESPONSE

    answer, _ = ask(pyask.input(MSG).validate(valid))
    assert answer == DEFAULT_RESPONSE

    with pytest.raises(ValidationError) as info:
        ask(pyask.input(MSG).validate(valid), "nope\n")
    assert info.value.answer == "nope"
    assert isinstance(info.value, AskError)

    with pytest.raises(TypeError):
        pyask.input(MSG).validate("not callable")


def test_can_accept_any_object_as_message():
    answer, written = ask(pyask.input(Message()).prompt(">"))
    assert answer == DEFAULT_RESPONSE
    assert written == "Test Message>"

    answer, written = ask(pyask.input(42))
    assert written == "42"


def test_uses_sys_streams_by_default(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", mock_input())
    monkeypatch.setattr("sys.stdout", out)
    assert pyask.input(MSG).prompt(":").ask() == DEFAULT_RESPONSE
    assert out.getvalue() == MSG + ":"


def test_no_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", None)
    with pytest.raises(AskError):
        pyask.input(MSG).redirect_out(io.StringIO()).ask()
