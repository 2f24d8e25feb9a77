"""
Main Streamlit application for MindCanvas.
"""

import os
import streamlit as st
from typing import Optional
from dotenv import load_dotenv
from app.core.credentials import SessionKeySelector, check_key_selection, select_key
from app.core.pipeline import InfographicPipeline
from app.frontend.api_client import ApiClient
from app.frontend.components import (
    header, sidebar, youtube_input, style_picker,
    progress_steps, display_result, display_error
)
from app.models.schemas import AppStatus
from app.utils.error_handling import InfographicError, user_message
from app.utils.logger import logging


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "key_selector" not in st.session_state:
        st.session_state.key_selector = SessionKeySelector(st.session_state)

    if "key_selected" not in st.session_state:
        st.session_state.key_selected = check_key_selection(st.session_state.key_selector)

    if "pipeline" not in st.session_state:
        st.session_state.pipeline = None


def get_pipeline() -> InfographicPipeline:
    """Build the pipeline once per session, then point its client at the current settings."""
    api_url = st.session_state.get("api_url") or os.getenv("API_URL", "http://localhost:8000")
    client = ApiClient(api_url, api_key=st.session_state.key_selector.api_key)

    pipeline = st.session_state.pipeline
    if pipeline is None:
        pipeline = InfographicPipeline(client, client)
        st.session_state.pipeline = pipeline
    elif not pipeline.busy:
        pipeline.analyzer = client
        pipeline.illustrator = client
    return pipeline


def handle_key_selection(api_key: str) -> Optional[str]:
    """
    Store a user-supplied API key.

    Args:
        api_key: Key entered in the sidebar

    Returns:
        Error message, or None on success
    """
    try:
        select_key(st.session_state.key_selector, api_key)
    except InfographicError as e:
        return user_message(e)
    st.session_state.key_selected = True
    return None


def handle_key_clear():
    """Forget the user-supplied API key."""
    selector = st.session_state.key_selector
    selector.clear()
    st.session_state.key_selected = check_key_selection(selector)


def run_generation(pipeline: InfographicPipeline, url: str, style, custom_prompt: str):
    """Run both steps, redrawing the progress panel on every status change."""
    placeholder = st.empty()

    def on_status(status: AppStatus):
        with placeholder.container():
            if status in (AppStatus.ANALYZING, AppStatus.GENERATING):
                st.markdown("### Creating your masterpiece...")
                progress_steps(status)

    pipeline.on_status = on_status
    try:
        pipeline.generate(url, style, custom_prompt)
    except Exception as e:
        # Shown from pipeline.error by home_view
        logging.debug(f"Generation ended with error: {user_message(e)}")
    finally:
        pipeline.on_status = None
        placeholder.empty()


def home_view():
    """Display the input form and the latest result."""
    pipeline = get_pipeline()

    url = youtube_input()
    style, custom_prompt = style_picker()

    if st.button(
        "Create Masterpiece ✨",
        type="primary",
        disabled=pipeline.busy,
        width="stretch",
    ):
        run_generation(pipeline, url, style, custom_prompt)

    if pipeline.error:
        display_error(pipeline.error)

    if pipeline.status == AppStatus.COMPLETE and pipeline.result:
        st.divider()
        display_result(pipeline.result)

        if st.button("Start over"):
            pipeline.reset()
            st.rerun()


def main():
    """Main application entry point."""
    header()
    init_session_state()
    sidebar(st.session_state.key_selected, handle_key_selection, handle_key_clear)
    home_view()


if __name__ == "__main__":
    main()
