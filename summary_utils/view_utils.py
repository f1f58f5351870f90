"""
View-side collaborators for the summary page.

Clipboard and ad integrations sit behind small interfaces so the page can be
rendered and tested without touching either.
"""

from typing import Optional, Protocol

import streamlit as st

from summary_utils.state_utils import FormState, Phase


class ClipboardWriter(Protocol):
    def write(self, text: str) -> None:
        ...


class AdRenderer(Protocol):
    def refresh(self) -> None:
        ...


class StreamlitClipboardWriter:
    """Shows the raw markdown in a code block, which carries Streamlit's copy button."""

    def write(self, text: str) -> None:
        with st.expander("📋 Copy markdown"):
            st.code(text, language="markdown")


class NullAdRenderer:
    def refresh(self) -> None:
        pass


def render_result(
    state: FormState,
    clipboard: ClipboardWriter,
    ads: AdRenderer,
    refreshed_for: Optional[int] = None,
) -> Optional[int]:
    """
    Render the finished call, if any.

    Ads refresh once per result: pass back the returned result id as
    refreshed_for on the next rerun.
    """
    if state.phase == Phase.SUCCESS:
        st.subheader("📘 Summary")
        st.markdown(state.result)
        clipboard.write(state.result)
        if state.result_id != refreshed_for:
            ads.refresh()
        return state.result_id
    if state.phase == Phase.FAILED:
        st.error(state.result)
    return refreshed_for
