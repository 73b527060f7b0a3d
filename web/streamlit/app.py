"""Sensitive word admin console."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from web.api import moderation  # noqa: E402
from web.api.errors import AppError  # noqa: E402
from web.api.moderation.schemas import CreateWordRequest  # noqa: E402

# Ensure container is initialized
container.init()

st.set_page_config(page_title="AI灵感社 - Sensitive Words", page_icon="🛡️", layout="wide")


def words_tab():
    words = moderation.list_words()

    cols = st.columns(3)
    cols[0].metric("Words", words.total)
    refreshed_at = container.word_cache.refreshed_at
    cols[1].metric("Cache loaded", refreshed_at.strftime("%H:%M:%S") if refreshed_at else "never")
    if cols[2].button("🔄 Reload cache"):
        result = moderation.refresh_words()
        if result.refreshed:
            st.success(f"Reloaded {result.total} words")
        else:
            st.warning("Word store unavailable, kept cached words")

    st.subheader("➕ Add word")
    with st.form("add_word", clear_on_submit=True):
        word = st.text_input("Word")
        if st.form_submit_button("Add") and word:
            try:
                created = moderation.add_word(CreateWordRequest(word=word))
                st.success(f'Added "{created.word}" (id {created.id})')
                st.rerun()
            except AppError as e:
                st.error(e.message)

    st.subheader("📋 Word list")
    query = st.text_input("Filter", placeholder="Search words...")
    items = [w for w in words.items if query in w.word] if query else words.items
    if not items:
        st.info("No sensitive words.")
        return

    for item in items:
        col1, col2 = st.columns([6, 1])
        col1.write(f"`{item.id}` {item.word}")
        if col2.button("Delete", key=f"delete_{item.id}"):
            try:
                moderation.remove_word(item.id)
                logger.info("Word {} deleted from console", item.id)
                st.rerun()
            except AppError as e:
                st.error(e.message)


def check_tab():
    st.subheader("🔍 Check text")
    text = st.text_area("Text to screen", height=150)
    if st.button("Check") and text:
        result = moderation.check_text(text)
        if result.is_sensitive:
            st.error("Contains sensitive words: " + ", ".join(result.matched_words))
        else:
            st.success("No sensitive words found.")


def main():
    st.title("🛡️ Sensitive Words")
    st.markdown("*Banned word list screened against posts, notes, resources, creator profiles and messages*")

    tab1, tab2 = st.tabs(["📋 Words", "🔍 Check"])
    with tab1:
        words_tab()
    with tab2:
        check_tab()

    st.sidebar.markdown("**Cache TTL:** reloads every hour per process")
    st.sidebar.markdown("Changes made here refresh only this process's cache.")


main()
