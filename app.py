import logging

import streamlit as st

from summary_utils.ai_utils import SummarizationClient
from summary_utils.config_utils import API_KEY_NAME, load_settings
from summary_utils.input_utils import PASTE_MODE, UPLOAD_MODE
from summary_utils.languages import language_codes, language_name
from summary_utils.pdf_utils import read_uploaded_pdf
from summary_utils.retry_utils import Fail
from summary_utils.state_utils import (
    AttemptStarted,
    FileCleared,
    FileSelected,
    Finished,
    FocusChanged,
    FormState,
    LanguageChanged,
    ModeChanged,
    SubmitStarted,
    TextChanged,
    can_submit,
    reduce,
    request_for,
)
from summary_utils.view_utils import NullAdRenderer, StreamlitClipboardWriter, render_result

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("archive_summary")

# =============================
# APP CONFIG
# =============================
st.set_page_config(
    page_title="ArcHive-Summary",
    page_icon="📄",
    layout="centered"
)

settings = load_settings()

# =============================
# SESSION STATE
# =============================
if "form" not in st.session_state:
    st.session_state.form = FormState()
if "upload_nonce" not in st.session_state:
    st.session_state.upload_nonce = 0


def dispatch(action):
    st.session_state.form = reduce(st.session_state.form, action)


def on_mode_change():
    dispatch(ModeChanged(st.session_state.mode_input))


def on_text_change():
    dispatch(TextChanged(st.session_state.source_text))


def on_focus_change():
    dispatch(FocusChanged(st.session_state.focus_instruction))


def on_language_change():
    dispatch(LanguageChanged(st.session_state.language_input))


def reset_uploader():
    st.session_state.upload_nonce += 1


def on_file_change(key):
    uploaded = st.session_state[key]
    if uploaded is None:
        dispatch(FileCleared())
        return
    selected = read_uploaded_pdf(uploaded)
    if selected is None:
        logger.info(f"Upload {uploaded.name!r} was not registered")
        reset_uploader()
    dispatch(FileSelected(selected))


def on_remove_file():
    dispatch(FileCleared())
    reset_uploader()


def on_submit():
    dispatch(SubmitStarted())


state = st.session_state.form

# =============================
# HEADER
# =============================
st.title("📄 ArcHive-Summary")
st.caption("Advanced AI Summarization Tool.")

if not settings.api_key:
    st.warning(f"🚨 {API_KEY_NAME} not found in the environment or secrets!")

# =============================
# INPUT
# =============================
st.radio(
    "Input",
    [UPLOAD_MODE, PASTE_MODE],
    index=[UPLOAD_MODE, PASTE_MODE].index(state.mode),
    format_func=lambda mode: "1. Upload PDF" if mode == UPLOAD_MODE else "1. Paste text",
    horizontal=True,
    key="mode_input",
    on_change=on_mode_change,
    disabled=state.busy,
    label_visibility="collapsed",
)

if state.mode == UPLOAD_MODE:
    if state.selected_file:
        pages = state.selected_file.page_count
        details = f"{pages} pages. " if pages else ""
        st.success(f"**{state.selected_file.name}**: {details}Ready. Click \"Summarize\".")
        st.button("Remove file", key="remove_file", on_click=on_remove_file, disabled=state.busy)
    else:
        upload_key = f"pdf_upload_{st.session_state.upload_nonce}"
        st.file_uploader(
            "1. Upload an academic paper (PDF)",
            type="pdf",
            key=upload_key,
            on_change=on_file_change,
            args=(upload_key,),
            disabled=state.busy,
        )
else:
    st.text_area(
        "1. Paste the paper's text",
        value=state.source_text,
        placeholder="Paste the text of an academic paper here.",
        height=250,
        key="source_text",
        on_change=on_text_change,
        disabled=state.busy,
    )

col1, col2 = st.columns([3, 1])
with col1:
    st.text_area(
        "2. Summary instructions (optional)",
        value=state.focus_instruction,
        placeholder="e.g. Summarize it simply enough for a high-school student.",
        height=80,
        key="focus_instruction",
        on_change=on_focus_change,
        disabled=state.busy,
    )
with col2:
    st.selectbox(
        "3. Output language",
        language_codes(),
        index=language_codes().index(state.language),
        format_func=language_name,
        key="language_input",
        on_change=on_language_change,
        disabled=state.busy,
    )

st.button(
    "Summarize",
    key="summarize",
    type="primary",
    on_click=on_submit,
    disabled=not can_submit(state),
)

# =============================
# SUMMARIZATION
# =============================
if state.busy:
    request = request_for(state)
    progress = st.empty()
    if request is None:
        outcome = Fail("Error: No valid content or file provided for summarization.")
    else:
        client = SummarizationClient(settings=settings)

        def on_attempt(attempt):
            dispatch(AttemptStarted(attempt))
            progress.caption(f"Attempt {attempt} of {settings.max_attempts}")

        with st.spinner("Analyzing the knowledge structure..."):
            outcome = client.run(request, on_attempt=on_attempt)
    dispatch(Finished(outcome))
    st.rerun()

st.session_state.ads_refreshed_for = render_result(
    state,
    clipboard=StreamlitClipboardWriter(),
    ads=NullAdRenderer(),
    refreshed_for=st.session_state.get("ads_refreshed_for"),
)
