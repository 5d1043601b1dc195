"""Session-bound view of the long string content holder."""
from html import escape
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

from modules.long_string import LongString
from src.utils import configure_logger

STATE_KEY = "long_string"


def get_long_string(state: Optional[MutableMapping[str, Any]] = None,
                    settings: Optional[Dict[str, Any]] = None) -> LongString:
    """Return the holder for the current session, initializing it once.

    Streamlit reruns the script on every interaction, so the holder is kept in
    session state and ``on_init`` only runs when it is first created.
    """
    if state is None:
        state = st.session_state
    component = state.get(STATE_KEY)
    if component is None:
        settings = settings or {}
        log_settings = settings.get("logging") or {}
        if log_settings.get("log_file"):
            configure_logger(log_settings["log_file"], log_settings.get("level", "DEBUG"))
        component = LongString.from_settings(settings)
        component.on_init()
        state[STATE_KEY] = component
    return component


def render_long_string(component: LongString) -> None:
    """Render the main text as markdown followed by the filler block."""
    st.markdown(component.main_text)
    st.markdown(
        f"<div class='filler-block'>{escape(component.filler_text)}</div>",
        unsafe_allow_html=True,
    )

    main_size, filler_size = component.sizes()
    with st.expander("📏 Taille du contenu"):
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Texte principal", f"{main_size:,} octets")
        with col2:
            st.metric("Remplissage", f"{filler_size:,} octets")
        if component.encoding:
            st.caption(f"Taille exacte en {component.encoding}")
        else:
            st.caption(f"Estimation à {component.char_width} octets par caractère")
