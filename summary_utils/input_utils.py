"""
Input assembly: turn the form's fields into one SummaryRequest.
"""

from dataclasses import dataclass
from typing import Optional

from summary_utils.languages import DEFAULT_LANGUAGE, language_name
from summary_utils.pdf_utils import FileContent, SelectedFile

UPLOAD_MODE = "upload"
PASTE_MODE = "paste"
MODES = (UPLOAD_MODE, PASTE_MODE)


@dataclass(frozen=True)
class SummaryRequest:
    """
    One summarization request. Exactly one of text_content and
    file_content is set.
    """

    focus_instruction: str
    target_language: str = DEFAULT_LANGUAGE
    text_content: Optional[str] = None
    file_content: Optional[FileContent] = None

    def __post_init__(self):
        has_text = self.text_content is not None
        has_file = self.file_content is not None
        if has_text == has_file:
            raise ValueError("SummaryRequest needs exactly one of text_content or file_content")


def build_instruction(focus_instruction: str, language_code: str) -> str:
    name = language_name(language_code)
    focus = (focus_instruction or "").strip().rstrip(".").rstrip()
    if not focus:
        return f"Translate the final summary into {name}."
    return f"{focus}. And translate the final summary into {name}."


def assemble_request(
    mode: str,
    source_text: str,
    selected_file: Optional[SelectedFile],
    focus_instruction: str,
    language_code: str,
) -> Optional[SummaryRequest]:
    """Build the request for the active mode, or None when there is nothing to send."""
    instruction = build_instruction(focus_instruction, language_code)

    if mode == UPLOAD_MODE:
        if selected_file is None:
            return None
        return SummaryRequest(
            focus_instruction=instruction,
            target_language=language_code,
            file_content=selected_file.content,
        )

    if mode == PASTE_MODE:
        if not source_text or not source_text.strip():
            return None
        return SummaryRequest(
            focus_instruction=instruction,
            target_language=language_code,
            text_content=source_text,
        )

    return None
