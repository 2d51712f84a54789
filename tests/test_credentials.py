"""Tests for the terminal credential prompt."""

from prompt_toolkit.input import create_pipe_input

from ghtools.core.credentials import TerminalPrompt


class TestTerminalPrompt:
    """Questions are asked on stderr, answers read from the input."""

    def test_questions_go_to_stderr(self, capsys):
        """Stdout stays empty while both questions are asked."""
        with create_pipe_input() as inp:
            prompt = TerminalPrompt(input=inp)
            inp.send_text("alice\r")
            assert prompt.ask_username("octocat") == "alice"
            inp.send_text("hunter2\r")
            assert prompt.ask_password() == "hunter2"

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Username for [octocat]" in captured.err
        assert "Password" in captured.err

    def test_password_is_not_echoed(self, capsys):
        """The typed password never appears in the rendered prompt."""
        with create_pipe_input() as inp:
            prompt = TerminalPrompt(input=inp)
            inp.send_text("hunter2\r")
            prompt.ask_password()

        assert "hunter2" not in capsys.readouterr().err

    def test_blank_username_keeps_default(self, capsys):
        """Pressing enter accepts the offered username."""
        with create_pipe_input() as inp:
            prompt = TerminalPrompt(input=inp)
            inp.send_text("\r")
            assert prompt.ask_username("octocat") == "octocat"

    def test_one_session_for_both_questions(self, capsys):
        """The username and password questions share a prompt session."""
        with create_pipe_input() as inp:
            prompt = TerminalPrompt(input=inp)
            inp.send_text("alice\r")
            prompt.ask_username()
            session = prompt.session
            inp.send_text("pw\r")
            prompt.ask_password()

        assert prompt.session is session
