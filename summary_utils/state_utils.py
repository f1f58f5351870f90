"""
Form state for the summary page.

The page keeps one immutable FormState in st.session_state and changes it
only through reduce(). The busy flag is the ATTEMPTING phase.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from summary_utils.input_utils import MODES, UPLOAD_MODE, SummaryRequest, assemble_request
from summary_utils.languages import DEFAULT_LANGUAGE, language_codes
from summary_utils.pdf_utils import SelectedFile
from summary_utils.retry_utils import Fail, Succeed


class Phase(str, Enum):
    IDLE = "idle"
    ATTEMPTING = "attempting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FormState:
    mode: str = UPLOAD_MODE
    source_text: str = ""
    focus_instruction: str = ""
    language: str = DEFAULT_LANGUAGE
    selected_file: Optional[SelectedFile] = None
    phase: Phase = Phase.IDLE
    attempt: int = 0
    result: str = ""
    # bumped by every finished call; never reset
    result_id: int = 0

    @property
    def busy(self) -> bool:
        return self.phase == Phase.ATTEMPTING


# Actions


@dataclass(frozen=True)
class ModeChanged:
    mode: str


@dataclass(frozen=True)
class TextChanged:
    text: str


@dataclass(frozen=True)
class FocusChanged:
    text: str


@dataclass(frozen=True)
class LanguageChanged:
    code: str


@dataclass(frozen=True)
class FileSelected:
    file: Optional[SelectedFile]


@dataclass(frozen=True)
class FileCleared:
    pass


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class AttemptStarted:
    attempt: int


@dataclass(frozen=True)
class Finished:
    outcome: Union[Succeed, Fail]


Action = Union[
    ModeChanged,
    TextChanged,
    FocusChanged,
    LanguageChanged,
    FileSelected,
    FileCleared,
    SubmitStarted,
    AttemptStarted,
    Finished,
]


def request_for(state: FormState) -> Optional[SummaryRequest]:
    return assemble_request(
        state.mode,
        state.source_text,
        state.selected_file,
        state.focus_instruction,
        state.language,
    )


def can_submit(state: FormState) -> bool:
    return not state.busy and request_for(state) is not None


def _cleared(state: FormState, **changes) -> FormState:
    # Editing the input invalidates whatever summary is on screen.
    return replace(state, phase=Phase.IDLE, attempt=0, result="", **changes)


def reduce(state: FormState, action: Action) -> FormState:
    if isinstance(action, AttemptStarted):
        return replace(state, attempt=action.attempt) if state.busy else state

    if isinstance(action, Finished):
        if not state.busy:
            return state
        if isinstance(action.outcome, Succeed):
            return replace(state, phase=Phase.SUCCESS, result=action.outcome.text, result_id=state.result_id + 1)
        return replace(state, phase=Phase.FAILED, result=action.outcome.message, result_id=state.result_id + 1)

    # Everything below is user input, which is locked while a call runs.
    if state.busy:
        return state

    if isinstance(action, ModeChanged):
        if action.mode not in MODES or action.mode == state.mode:
            return state
        return _cleared(state, mode=action.mode)

    if isinstance(action, TextChanged):
        return _cleared(state, source_text=action.text)

    if isinstance(action, FocusChanged):
        return replace(state, focus_instruction=action.text)

    if isinstance(action, LanguageChanged):
        if action.code not in language_codes():
            return state
        return replace(state, language=action.code)

    if isinstance(action, FileSelected):
        return _cleared(state, selected_file=action.file)

    if isinstance(action, FileCleared):
        return _cleared(state, selected_file=None)

    if isinstance(action, SubmitStarted):
        if request_for(state) is None:
            return state
        return replace(state, phase=Phase.ATTEMPTING, attempt=1, result="")

    raise TypeError(f"Unknown action: {action!r}")
