"""Client-side analysis session as an explicit finite-state machine.

States::

    no_file --load_file--> file_loaded --begin_analysis--> loading
    loading --complete--> results
    loading --fail------> error --dismiss_error--> file_loaded
    any -----load_failed-> error

``load_file``, ``load_failed`` and ``remove_file`` are accepted from every
state and invalidate any request still in flight. Results and errors carry the token
returned by ``begin_analysis``; an outcome for a stale token is dropped.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from models.action_models import Action


EMPTY_STATE_MESSAGE = 'Click "Analyze Transcript" to extract action items'


class SessionState(str, Enum):
    """States of an analysis session."""
    no_file = "no_file"
    file_loaded = "file_loaded"
    loading = "loading"
    results = "results"
    error = "error"


class ViewMode(str, Enum):
    """How held actions are displayed."""
    table = "table"
    list = "list"


class InvalidTransitionError(RuntimeError):
    """The requested transition is not allowed from the current state."""


@dataclass
class TranscriptSession:
    """State of one user's transcript analysis."""
    state: SessionState = SessionState.no_file
    file_name: Optional[str] = None
    transcript: str = ""
    actions: Tuple[Action, ...] = ()
    error: Optional[str] = None
    view_mode: ViewMode = ViewMode.table
    _token: int = field(default=0, repr=False)

    @property
    def can_analyze(self) -> bool:
        """Whether the analyze trigger is enabled."""
        return (
            self.state in (SessionState.file_loaded, SessionState.results, SessionState.error)
            and bool(self.transcript)
        )

    @property
    def is_loading(self) -> bool:
        return self.state is SessionState.loading

    @property
    def show_empty_state(self) -> bool:
        """Whether the "click analyze" hint is shown instead of results."""
        return (
            self.state in (SessionState.file_loaded, SessionState.results)
            and bool(self.transcript)
            and not self.actions
        )

    def load_file(self, file_name: str, transcript: str) -> None:
        """Select a file, replacing any previous file, results and error."""
        self._token += 1
        self.state = SessionState.file_loaded
        self.file_name = file_name
        self.transcript = transcript
        self.actions = ()
        self.error = None

    def load_failed(self, file_name: str, message: str) -> None:
        """Record a file that could not be read; nothing is left to analyze."""
        self._token += 1
        self.state = SessionState.error
        self.file_name = file_name
        self.transcript = ""
        self.actions = ()
        self.error = message

    def remove_file(self) -> None:
        """Drop the current file and everything derived from it."""
        self._token += 1
        self.state = SessionState.no_file
        self.file_name = None
        self.transcript = ""
        self.actions = ()
        self.error = None

    def begin_analysis(self) -> int:
        """Enter the loading state.

        Returns:
            Token to pass to complete() or fail()

        Raises:
            InvalidTransitionError: If no transcript is loaded or a request
                is already in flight
        """
        if not self.can_analyze:
            raise InvalidTransitionError(
                f"Cannot analyze from state {self.state.value} "
                f"(transcript loaded: {bool(self.transcript)})"
            )
        self._token += 1
        self.state = SessionState.loading
        self.actions = ()
        self.error = None
        return self._token

    def complete(self, token: int, actions: Sequence[Action]) -> bool:
        """Store the actions of a finished analysis.

        Returns:
            False if the token is stale and the result was dropped
        """
        if not self._is_current(token):
            return False
        self.state = SessionState.results
        self.actions = tuple(actions)
        return True

    def fail(self, token: int, message: str) -> bool:
        """Record a failed analysis.

        Returns:
            False if the token is stale and the error was dropped
        """
        if not self._is_current(token):
            return False
        self.state = SessionState.error
        self.actions = ()
        self.error = message
        return True

    def dismiss_error(self) -> None:
        if self.state is not SessionState.error:
            raise InvalidTransitionError(f"No error to dismiss in state {self.state.value}")
        self.state = SessionState.file_loaded
        self.error = None

    def set_view_mode(self, mode: ViewMode) -> None:
        """Switch rendering; held actions are untouched."""
        self.view_mode = ViewMode(mode)

    def _is_current(self, token: int) -> bool:
        return self.state is SessionState.loading and token == self._token
