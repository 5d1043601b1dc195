"""Header component for the long string page."""
import streamlit as st


def render_header(title: str = "Long String", published: str = "2023-07-18",
                  style: str = "default") -> str:
    """Render the page header and return its HTML.

    Args:
        title: Titre affiché dans le header.
        published: Date de publication au format ISO (``YYYY-MM-DD``).
        style: Style du header ("default" ou "compact").

    Returns:
        str: Le code HTML du header généré.
    """
    time_tag = f"<time datetime='{published}'>{published}</time>" if published else ""

    if style == "compact":
        html = (
            "<header>"
            "<div style='display:flex;align-items:baseline;gap:1rem'>"
            f"<h3 style='margin:0'>{title}</h3>"
            f"<span>{time_tag}</span>"
            "</div>"
            "</header>"
        )
    else:
        html_parts = ["<header class='main-header'>"]
        html_parts.append(f"<h1>{title}</h1>")
        if time_tag:
            html_parts.append(f"<p>{time_tag}</p>")
        html_parts.append("</header>")
        html = "\n".join(html_parts)

    st.markdown(html, unsafe_allow_html=True)
    st.markdown("---")
    return html
