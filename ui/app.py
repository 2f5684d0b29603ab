"""Notes — Streamlit list/editor interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `ui.*` imports resolve
# regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Notes",
    page_icon="📝",
    layout="wide",
    initial_sidebar_state="expanded",
)

from notes.config import settings  # noqa: E402
from notes.metrics import start_metrics_server  # noqa: E402
from ui.components import note_editor, note_list, sidebar, topbar  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)


@st.cache_resource
def _metrics_server(port: int) -> bool:
    """Start the Prometheus endpoint once per Streamlit process."""
    return start_metrics_server(port)


_metrics_server(settings.metrics_port)

sidebar.render()
topbar.render()

col_list, col_editor = st.columns([2, 3])
with col_list:
    note_list.render()
with col_editor:
    note_editor.render()
