"""Plain-text rendering of analysis sessions.

Both view modes are built from the same rows, so switching between them
never changes what is shown, only how.
"""
from typing import List, Sequence, Tuple

from models.action_models import Action
from client.session import EMPTY_STATE_MESSAGE, TranscriptSession, ViewMode


OWNER_HEADER = "Owner"
TASK_HEADER = "Task"


def _single_line(text: str) -> str:
    return " ".join(text.split())


def action_rows(actions: Sequence[Action]) -> List[Tuple[str, str]]:
    """Return one (owner, task) row per action, in order.

    Line breaks and runs of whitespace inside a field collapse to single
    spaces so each action occupies exactly one line.
    """
    return [
        (_single_line(action.display_owner), _single_line(action.task))
        for action in actions
    ]


def render_table(actions: Sequence[Action]) -> str:
    rows = action_rows(actions)
    width = max([len(OWNER_HEADER)] + [len(owner) for owner, _ in rows])
    lines = [
        f"{OWNER_HEADER.ljust(width)} | {TASK_HEADER}",
        f"{'-' * width}-+-{'-' * len(TASK_HEADER)}",
    ]
    lines.extend(f"{owner.ljust(width)} | {task}" for owner, task in rows)
    return "\n".join(lines)


def render_list(actions: Sequence[Action]) -> str:
    return "\n".join(f"- {owner}: {task}" for owner, task in action_rows(actions))


def render_actions(actions: Sequence[Action], mode: ViewMode) -> str:
    """Render actions in the given view mode."""
    if ViewMode(mode) is ViewMode.table:
        return render_table(actions)
    return render_list(actions)


def render_session(session: TranscriptSession) -> str:
    """Render everything the user currently sees for a session."""
    if session.is_loading:
        return "Analyzing transcript..."
    if session.error:
        return f"Error: {session.error}"
    if session.actions:
        header = f"Action Items ({len(session.actions)})"
        return f"{header}\n\n{render_actions(session.actions, session.view_mode)}"
    if session.show_empty_state:
        return EMPTY_STATE_MESSAGE
    return "No transcript loaded"
