"""UI styling constants for the Streamlit app."""

PRIMARY_COLOR = "#1E3A8A"
SECONDARY_COLOR = "#3B82F6"
BACKGROUND_COLOR = "#FFFFFF"
TEXT_COLOR = "#1c1c1c"
FONT_FAMILY = "Inter, sans-serif"

CUSTOM_CSS = f"""
<link rel="preconnect" href="https://fonts.googleapis.com">
<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600&display=swap" rel="stylesheet">
<style>
body {{font-family: {FONT_FAMILY}; color: {TEXT_COLOR};}}

.main-header {{
    background: linear-gradient(135deg, {PRIMARY_COLOR} 0%, {SECONDARY_COLOR} 100%);
    color: white;
    padding: 2rem;
    margin: -1rem -1rem 2rem -1rem;
    text-align: center;
}}

.main-header h1 {{
    font-size: 2.5rem;
    font-weight: 700;
    margin: 0;
}}

.filler-block {{
    font-family: monospace;
    white-space: pre;
    overflow-x: auto;
    color: #6B7280;
}}
</style>
"""
