"""
Long String - Page de contenu statique
"""
import streamlit as st
import yaml

from health_check import display_health_status
from src.utils import load_settings
from ui.components.header import render_header
from ui.components.long_string_view import get_long_string, render_long_string
from ui.styles import CUSTOM_CSS

CONFIG_PATH = "config/config.yaml"


def render_footer():
    """Affiche le pied de page."""
    st.markdown("---")
    st.markdown(
        """
        <div style='text-align: center; color: #6B7280; font-size: 0.875rem;'>
        Long String | Pattern Matching in C#
        </div>
        """,
        unsafe_allow_html=True
    )


def main():
    """Point d'entrée principal de l'application."""
    # Configuration de la page - DOIT ÊTRE LA PREMIÈRE COMMANDE STREAMLIT
    st.set_page_config(
        page_title="Long String",
        page_icon="📜",
        layout="wide",
    )
    st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

    display_health_status()

    render_header()

    try:
        settings = load_settings(CONFIG_PATH)
        component = get_long_string(settings=settings)
    except (OSError, yaml.YAMLError, LookupError, TypeError, ValueError) as e:
        st.error(f"⚠️ Erreur de configuration : {e}")
        return

    render_long_string(component)

    render_footer()


if __name__ == "__main__":
    main()
