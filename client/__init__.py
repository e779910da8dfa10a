"""Python client for the transcript action analyzer."""
from .analyze_client import AnalyzeClient, AnalyzeRequestError, run_analysis
from .files import ACCEPTED_EXTENSIONS, UnsupportedFileError, read_transcript_file
from .render import render_actions, render_session
from .session import InvalidTransitionError, SessionState, TranscriptSession, ViewMode

__all__ = [
    "AnalyzeClient",
    "AnalyzeRequestError",
    "run_analysis",
    "ACCEPTED_EXTENSIONS",
    "UnsupportedFileError",
    "read_transcript_file",
    "render_actions",
    "render_session",
    "InvalidTransitionError",
    "SessionState",
    "TranscriptSession",
    "ViewMode",
]
