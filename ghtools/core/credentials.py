"""Interactive credential prompting."""

from __future__ import annotations

import sys
from typing import Optional, Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output, create_output


class CredentialPrompt(Protocol):
    """Something that can ask the user for a username and password."""

    def ask_username(self, default: str = "") -> str: ...

    def ask_password(self) -> str: ...


class TerminalPrompt:
    """Ask on the controlling terminal; the password is typed without echo.

    Questions are drawn on stderr so stdout carries only command results,
    e.g. when piping into ``jq``.
    """

    def __init__(self, input: Optional[Input] = None, output: Optional[Output] = None):
        self._input = input
        self._output = output
        self._session: Optional[PromptSession] = None

    @property
    def session(self) -> PromptSession:
        """Lazy-initialize one prompt session for both questions."""
        if self._session is None:
            output = self._output or create_output(stdout=sys.stderr)
            self._session = PromptSession(input=self._input, output=output)
        return self._session

    def ask_username(self, default: str = "") -> str:
        answer = self.session.prompt(f"Username for [{default}]: ").strip()
        return answer or default

    def ask_password(self) -> str:
        return self.session.prompt("Password: ", is_password=True)
