"""
Reusable UI components for the Streamlit app.
"""

import os
import streamlit as st
from typing import Callable, Optional, Tuple

from app.core.prompts import STYLE_LABELS
from app.models.schemas import AppStatus, GenerationResult, VisualStyle
from app.utils.helpers import build_download_filename, data_url_to_bytes


STYLE_ICONS = {
    VisualStyle.WHITEBOARD: "🖊️",
    VisualStyle.NOTEBOOK: "📓",
    VisualStyle.CUSTOM: "✨",
}


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="MindCanvas",
        page_icon="✨",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    st.title("✨ MindCanvas")
    st.markdown("""
    Turn complex YouTube videos into crystal-clear, hand-drawn infographic summaries.
    """)
    st.divider()


def sidebar(
    key_selected: bool,
    on_select_key: Callable[[str], Optional[str]],
    on_clear_key: Callable[[], None],
):
    """
    Display the sidebar with connection settings.

    Args:
        key_selected: Whether the user already selected an API key
        on_select_key: Called with the entered key, returns an error message or None
        on_clear_key: Called when the user disconnects their key
    """
    with st.sidebar:
        st.title("MindCanvas")

        st.markdown("## Settings")
        st.text_input("API URL", value=os.getenv("API_URL", "http://localhost:8000"), key="api_url")

        st.markdown("## API Key")
        if key_selected:
            st.success("Using your selected API key")
            if st.button("Disconnect API key"):
                on_clear_key()
                st.rerun()
        else:
            st.caption("No key selected, the server's default credentials are used.")

        with st.form(key="api_key_form"):
            api_key = st.text_input("Gemini API key", type="password")
            submit = st.form_submit_button("Connect API Key")

        if submit:
            error = on_select_key(api_key)
            if error:
                st.error(error)
            else:
                st.success("API key connected.")


def youtube_input() -> str:
    """
    Display the YouTube URL input field.

    Returns:
        The entered URL
    """
    return st.text_input(
        "1. Paste Video URL",
        placeholder="https://www.youtube.com/watch?v=...",
        key="video_url",
    )


def style_picker() -> Tuple[VisualStyle, str]:
    """
    Display the style cards and, for the Custom style, a prompt box.

    Returns:
        Tuple of the selected style and the custom prompt ("" when unused)
    """
    st.markdown("**2. Choose Style**")
    style = st.radio(
        "Style",
        options=list(VisualStyle),
        format_func=lambda s: f"{STYLE_ICONS[s]} {s.value}: {STYLE_LABELS[s]}",
        key="style",
        label_visibility="collapsed",
    )

    custom_prompt = ""
    if style == VisualStyle.CUSTOM:
        custom_prompt = st.text_area(
            "Describe the visual style you want",
            placeholder="e.g., 'Futuristic neon blueprint', 'Medieval parchment scroll'",
            key="custom_prompt",
            height=80,
        )
    return style, custom_prompt


def progress_steps(status: AppStatus):
    """
    Display the two generation steps and which one is running.

    Args:
        status: Current request status
    """
    analyzing = status == AppStatus.ANALYZING
    generating = status == AppStatus.GENERATING

    if analyzing:
        st.info("⏳ **Deep Analysis**: extracting video insights and structure (thinking...)")
    else:
        st.success("✅ **Deep Analysis**: done")

    if generating:
        st.info("⏳ **Visual Synthesis**: drawing the hand-drawn infographic...")
    else:
        st.caption("◌ **Visual Synthesis**: waiting")


def display_result(result: GenerationResult):
    """
    Display the generated infographic, its summary, and a download button.

    Args:
        result: Completed generation
    """
    st.image(result.image_url, caption="Generated Infographic", width="stretch")

    image_bytes, mime = data_url_to_bytes(result.image_url)
    st.download_button(
        label="Download PNG",
        data=image_bytes,
        file_name=build_download_filename(),
        mime=mime,
        width="stretch",
    )

    st.markdown("### Video Analysis")
    if result.video_title:
        st.markdown(f"#### {result.video_title}")
    st.markdown(result.summary)

    with st.expander("Pro Tip"):
        st.markdown(
            'Try the "Custom" style and describe a specific aesthetic like '
            '"Cyberpunk schematic" or "Da Vinci sketchbook" for unique results!'
        )


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)
