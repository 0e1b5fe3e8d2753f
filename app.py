"""
HanziCards - Chinese Character Flashcards

Streamlit application for studying the new characters of each school grade.
Shows one character at a time with pinyin, word groups and an example
sentence, and remembers which characters are learned, need review or are
mastered.

Usage:
    streamlit run app.py
"""

import functools
import logging

import streamlit as st

from hanzicards.classroom import (
    DeckLoader,
    KeyValueStore,
    ProgressTracker,
    SliderSource,
    StudySession,
)
from hanzicards.config import load_settings, setup_logging
from hanzicards.viewer import (
    SpeechSynthesizer,
    get_card_css,
    render_card,
    render_empty_card,
    render_hint,
    render_slider_card,
    render_stats,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

SETTINGS = load_settings()
setup_logging(SETTINGS.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="HanziCards",
    page_icon="📖",
    layout="centered",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "loader" not in st.session_state:
        st.session_state.loader = DeckLoader(SETTINGS.data_path)

    if "tracker" not in st.session_state:
        st.session_state.tracker = ProgressTracker(KeyValueStore(SETTINGS.progress_db))

    if "synthesizer" not in st.session_state:
        st.session_state.synthesizer = SpeechSynthesizer(
            audio_dir=SETTINGS.audio_dir,
            language_code=SETTINGS.tts_language,
            voice_name=SETTINGS.tts_voice,
            speaking_rate=SETTINGS.speaking_rate,
        )

    if "session" not in st.session_state:
        grade = st.session_state.tracker.get_selected_grade(SETTINGS.default_grade)
        st.session_state.session = StudySession.start(
            grade,
            st.session_state.loader,
            st.session_state.tracker,
            page_size=SETTINGS.page_size,
        )

    if "audio" not in st.session_state:
        st.session_state.audio = None

    if "notice" not in st.session_state:
        st.session_state.notice = None


# -----------------------------------------------------------------------------
# Sidebar: Grade and Statistics
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with grade selector and learning statistics."""
    st.sidebar.title("📖 HanziCards")

    session: StudySession = st.session_state.session
    loader: DeckLoader = st.session_state.loader

    grades = loader.get_grades()
    if session.grade not in grades:
        grades = [session.grade] + grades

    grade = st.sidebar.selectbox("年级", grades, index=grades.index(session.grade))
    if grade != session.grade:
        st.session_state.session = session.switch_grade(grade, loader)
        st.rerun()

    st.sidebar.divider()
    st.sidebar.subheader("学习统计")
    st.sidebar.markdown(get_card_css(), unsafe_allow_html=True)
    st.sidebar.markdown(render_stats(session.stats()), unsafe_allow_html=True)

    st.sidebar.divider()
    st.sidebar.subheader("复习")
    col1, col2 = st.sidebar.columns(2)
    with col1:
        if st.button("需复习", key="open_review", use_container_width=True):
            session.slider.open(SliderSource.REVIEW)
            st.rerun()
    with col2:
        if st.button("已掌握", key="open_mastered", use_container_width=True):
            session.slider.open(SliderSource.MASTERED)
            st.rerun()

    st.sidebar.divider()
    if st.sidebar.button("重置本年级进度"):
        session.reset_progress()
        st.rerun()


# -----------------------------------------------------------------------------
# Main Content: Study Card
# -----------------------------------------------------------------------------

def render_study_view():
    """Render the current character card with controls."""
    session: StudySession = st.session_state.session

    st.title(f"{session.grade} 生字学习")
    st.markdown(get_card_css(), unsafe_allow_html=True)

    entry = session.current()
    if entry is None:
        st.markdown(render_empty_card(), unsafe_allow_html=True)
        return

    render_progress_bar()

    st.markdown(render_card(entry, session.status()), unsafe_allow_html=True)

    # play once; later reruns should not repeat the pronunciation
    audio, st.session_state.audio = st.session_state.audio, None
    if audio:
        st.audio(audio, format="audio/mp3", autoplay=True)

    render_action_buttons()
    render_navigation_bar()

    st.markdown(render_hint(session.status()), unsafe_allow_html=True)


def render_progress_bar():
    """Render deck position as a progress bar."""
    nav = st.session_state.session.navigator
    current, total = nav.position
    st.progress(nav.progress_percent / 100, text=f"{current}/{total}")


def render_action_buttons():
    """Render speak / review / mastered buttons."""
    session: StudySession = st.session_state.session
    synthesizer: SpeechSynthesizer = st.session_state.synthesizer

    col1, col2, col3 = st.columns(3)

    with col1:
        if st.button("🔊 朗读", key="speak", use_container_width=True):
            speaker = functools.partial(synthesizer.speak, grade=session.grade)
            audio = session.speak_current(speaker)
            st.session_state.audio = audio
            if audio is None:
                st.session_state.notice = "语音朗读暂不可用。"
            st.rerun()

    with col2:
        if st.button("需要复习", key="mark_review", use_container_width=True):
            char = session.mark_review()
            st.session_state.notice = f"已将\"{char}\"标记为需要复习。"
            st.rerun()

    with col3:
        if st.button("已掌握", key="mark_mastered", type="primary", use_container_width=True):
            char = session.mark_mastered()
            st.session_state.notice = f"恭喜！已将\"{char}\"标记为已掌握。"
            st.rerun()


def render_navigation_bar():
    """Render navigation bar with prev/next buttons."""
    nav = st.session_state.session.navigator

    col1, col2 = st.columns(2)

    with col1:
        if st.button("← 上一个", disabled=not nav.has_prev, use_container_width=True):
            nav.prev()
            st.rerun()

    with col2:
        if st.button("下一个 →", disabled=not nav.has_next, use_container_width=True):
            nav.next()
            st.rerun()


# -----------------------------------------------------------------------------
# Review Slider
# -----------------------------------------------------------------------------

def render_slider():
    """Render the paged review/mastered card slider."""
    session: StudySession = st.session_state.session
    slider = session.slider
    if not slider.is_open:
        return

    st.divider()
    title = "需复习的生字" if slider.source == SliderSource.REVIEW else "已掌握的生字"
    header, close = st.columns([4, 1])
    with header:
        st.subheader(title)
    with close:
        if st.button("关闭", key="slider_close"):
            slider.close()
            st.rerun()

    items = session.slider_items()
    visible = slider.visible(items)
    if not visible:
        st.info("暂无生字。")
        return

    columns = st.columns(slider.page_size)
    for col, entry in zip(columns, visible):
        with col:
            st.markdown(render_slider_card(entry), unsafe_allow_html=True)
            if st.button("学习", key=f"slider_{entry.character}", use_container_width=True):
                session.select_from_slider(entry.character)
                st.rerun()

    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("‹", key="slider_prev", disabled=not slider.has_prev_page(), use_container_width=True):
            slider.prev_page()
            st.rerun()
    with col2:
        st.markdown(f"<center>{slider.page_label(items)}</center>", unsafe_allow_html=True)
    with col3:
        if st.button("›", key="slider_next", disabled=not slider.has_next_page(items), use_container_width=True):
            slider.next_page(items)
            st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def show_notice():
    """Show and clear the feedback left by the previous action."""
    if st.session_state.notice:
        st.toast(st.session_state.notice)
        st.session_state.notice = None


def main():
    """Main application entry point."""
    init_session_state()
    show_notice()
    render_sidebar()
    render_study_view()
    render_slider()


if __name__ == "__main__":
    main()
