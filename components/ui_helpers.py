"""
UI helper functions for the Countries & Continents Streamlit application.
"""

import html
import random

import streamlit as st
from st_flexible_callout_elements import flexible_callout


def print_widget_label(label_text, icon=None, help_text=None, sidebar=False):
    """
    Print a formatted widget label with optional icon and help text.

    Args:
        label_text: The text to display
        icon: Optional material icon name (without 'material/' prefix)
        help_text: Optional help text tooltip
        sidebar: If True, displays in sidebar with smaller text
    """
    if icon:
        line = f":material/{icon}: &nbsp; "
    else:
        line = ""

    if sidebar:
        st.sidebar.markdown(
            f"<small>{line}<b>{label_text}</b></small>", unsafe_allow_html=True, help=help_text)
    else:
        st.markdown(f"{line}**{label_text}**", help=help_text)


def info_box(msg, title=None, icon=":material/info:"):
    """
    Display an informational callout box.

    Args:
        msg: The message to display
        title: Optional title (will be bold)
        icon: Icon to display (default: info icon)
    """
    if title:
        msg = f'<span style="font-weight: bold;">{title}</span><br>{msg}'

    flexible_callout(msg,
                     icon=icon,
                     background_color="#e6f0ff",
                     font_color="#191970",
                     icon_size=23)


def warning_box(msg, title=None, icon=":material/warning:"):
    """
    Display a warning callout box.

    Args:
        msg: The message to display
        title: Optional title (will be bold)
        icon: Icon to display (default: warning icon)
    """
    if title:
        msg = f'<span style="font-weight: bold;">{title}</span><br>{msg}'

    flexible_callout(msg,
                     icon=icon,
                     background_color="#fffbeb",
                     font_color="#936b0c",
                     icon_size=23)


def code_span(text):
    """
    Wrap text in a styled code span with monospace font and specific color.

    Args:
        text: The text to wrap in code styling

    Returns:
        str: HTML formatted code span
    """
    return f"<code style='color:#4682b4; font-family:monospace;'>{html.escape(str(text))}</code>"


def detail_row(label, icon, value):
    """
    Display one field of the country details: bold label left, value right.

    Values come straight from the dataset, so they are escaped before rendering.
    An empty value still renders the row to keep the layout stable.
    """
    label_col, value_col = st.columns([2, 3])
    with label_col:
        st.markdown(f"<div class='detail-label'>{icon} {html.escape(label)}:</div>", unsafe_allow_html=True)
    with value_col:
        st.markdown(f"<div class='detail-value'>{html.escape(value) or '&nbsp;'}</div>", unsafe_allow_html=True)


def flag_frame(image, width):
    """
    Display the flag image inside a framed box, or an empty frame when there is none.

    Args:
        image: PIL image or None
        width: Display width in pixels
    """
    with st.container(border=True):
        if image is not None:
            st.image(image, width=width)
        else:
            st.markdown("<div class='flag-placeholder'></div>", unsafe_allow_html=True)


class BlockingLoader:
    """
    Full-page blocking loader for Streamlit.
    Prevents any user interaction while active.
    Transparent background, solid fixed-size loader box.
    Shows a random globe emoji on each update.
    """

    def __init__(self, overlay_color="rgba(255, 255, 255, 0.6)"):
        self.overlay_color = overlay_color
        self.current_text = "Loading..."
        self.current_emoji = "🌍"
        self.globes = ["🌍", "🌎", "🌏", "🗺️", "🧭"]
        self._placeholder = st.empty()

    def _render_overlay(self, text, emoji):
        overlay_html = f"""
        <style>
        body {{
            pointer-events: none !important; /* Block all interaction */
        }}
        .blocking-overlay {{
            position: fixed;
            top: 0;
            left: 0;
            width: 100vw;
            height: 100vh;
            background-color: {self.overlay_color};
            z-index: 999999 !important;
            display: flex;
            align-items: center;
            justify-content: center;
        }}
        .loader-box {{
            width: 500px;
            height: 350px;
            background: #ffffff;
            border-radius: 18px;
            box-shadow: 0px 6px 24px rgba(0,0,0,0.25);
            text-align: center;
            pointer-events: all !important;
            font-family: "Segoe UI", "Source Sans Pro", sans-serif;
            display: flex;
            flex-direction: column;
            align-items: center;
            justify-content: center;
        }}
        .loader-emoji {{
            font-size: 64px;
            margin-bottom: 20px;
        }}
        .loader-text {{
            font-size: 24px;
            color: #191970;
        }}
        </style>
        <div class="blocking-overlay">
            <div class="loader-box">
                <div class="loader-emoji">{emoji}</div>
                <div class="loader-text">{text}</div>
            </div>
        </div>
        """
        self._placeholder.markdown(overlay_html, unsafe_allow_html=True)

    def open(self, initial_text="Loading..."):
        self.current_text = initial_text
        self.current_emoji = random.choice(self.globes)
        self._render_overlay(self.current_text, self.current_emoji)

    def update_text(self, new_text):
        self.current_text = new_text
        self.current_emoji = random.choice(self.globes)
        self._render_overlay(self.current_text, self.current_emoji)

    def close(self):
        self._placeholder.empty()
        st.markdown(
            """
            <style>
            body { pointer-events: auto !important; }
            </style>
            """,
            unsafe_allow_html=True,
        )


def section_header(text, large=False):
    """
    Display a styled header with an underline.

    Args:
        text: The header text to display
        large: Centered page title instead of a panel header
    """
    if large:
        heading = f"<h1 style='text-align: center; font-size: 2.2rem; font-weight: 700; color: #191970; margin-bottom: 0.15rem;'>{text}</h1>"
        rule = "<hr style='margin-top: 0; margin-bottom: 1rem; border: none; border-top: 3px solid #4682b4;'>"
    else:
        heading = f"<h3 style='font-size: 1.25rem; font-weight: 600; color: #191970; margin-bottom: 0.05rem;'>{text}</h3>"
        rule = "<hr style='margin-top: 0; margin-bottom: 0.5rem; border: none; border-top: 2px solid #4682b4;'>"
    st.markdown(heading + rule, unsafe_allow_html=True)
