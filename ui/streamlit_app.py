import asyncio
import html

import streamlit as st

from ramayana.core.config import settings
from ramayana.core.models import Kanda, Sarga, Shloka, ShlokaView
from ramayana.main import create_reader
from ramayana.services.state_service import ReaderViewModel


@st.cache_resource
def get_reader() -> ReaderViewModel:
    # One load per server process; the loop only lives for that load.
    return asyncio.run(create_reader())


def open_sarga(kanda_id: str, sarga_id: str) -> None:
    st.session_state.sarga = (kanda_id, sarga_id)


def close_sarga() -> None:
    st.session_state.sarga = None


def render_kanda(reader: ReaderViewModel, kanda: Kanda) -> None:
    accent = reader.resolve_accent_color(kanda.color_theme)
    with st.expander(f"{kanda.name} · {kanda.description}"):
        st.markdown(
            f'<div style="border-left: 4px solid {accent.to_css()}; border-radius: 2px; '
            f'padding-left: 8px;">{html.escape(kanda.description)}</div>',
            unsafe_allow_html=True,
        )
        for sarga in kanda.sargas:
            c1, c2 = st.columns([6, 2])
            with c1:
                st.markdown(f"**Sarga {sarga.id}**")
                st.caption(sarga.description)
            with c2:
                st.button(
                    "Open",
                    key=f"open-{kanda.id}-{sarga.id}",
                    on_click=open_sarga,
                    args=(kanda.id, sarga.id),
                )


def render_shloka(shloka: Shloka) -> None:
    st.caption(f"श्लोक {shloka.id}")
    view = st.radio(
        "View",
        options=list(ShlokaView),
        format_func=lambda v: v.label,
        horizontal=True,
        key=f"view-{shloka.id}",
        label_visibility="collapsed",
    )
    text = shloka.text(view)
    if view is ShlokaView.MEANING:
        st.write(text)
    else:
        st.markdown(f"<div style='text-align: center; font-family: serif;'>{html.escape(text)}</div>", unsafe_allow_html=True)
    st.divider()


def render_sarga(sarga: Sarga) -> None:
    st.button("← Back", on_click=close_sarga)
    st.markdown(f"## Sarga {sarga.id}")
    for shloka in sarga.shlokas:
        render_shloka(shloka)


st.set_page_config(page_title=settings.APP_NAME, page_icon="📜", layout="centered")

if "sarga" not in st.session_state:
    st.session_state.sarga = None

reader = get_reader()
document = reader.document

selected = None
if document is not None and st.session_state.sarga:
    kanda_id, sarga_id = st.session_state.sarga
    kanda = document.kanda(kanda_id)
    selected = kanda.sarga(sarga_id) if kanda else None

if selected is not None:
    render_sarga(selected)
else:
    st.markdown("# श्रीरामायण")
    # Search field is display-only; its value stays in this browser session.
    st.text_input(
        "Search Ramayana",
        key="search",
        placeholder="🔍 Search Ramayana",
        label_visibility="collapsed",
    )
    if document is None:
        with st.spinner("Loading…"):
            st.caption("No text available yet.")
    else:
        for kanda in document.kandas:
            render_kanda(reader, kanda)
