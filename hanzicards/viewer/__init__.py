"""
HanziCards Viewer - Rendering components for the study page.

This module provides:
- Character card and slider card rendering
- Status hints and statistics display
- Pronunciation audio
"""

from .card import (
    get_card_css,
    hint_for_status,
    render_status_badge,
    render_word_groups,
    render_card,
    render_empty_card,
    render_hint,
    render_stats,
    render_slider_card,
    STATUS_HINTS,
    STATUS_LABELS,
)

from .audio import (
    SpeechSynthesizer,
    synthesize_speech,
    find_cached_audio,
    get_audio_path,
    safe_filename,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_VOICE_NAME,
    DEFAULT_SPEAKING_RATE,
)

__all__ = [
    # Card
    "get_card_css",
    "hint_for_status",
    "render_status_badge",
    "render_word_groups",
    "render_card",
    "render_empty_card",
    "render_hint",
    "render_stats",
    "render_slider_card",
    "STATUS_HINTS",
    "STATUS_LABELS",
    # Audio
    "SpeechSynthesizer",
    "synthesize_speech",
    "find_cached_audio",
    "get_audio_path",
    "safe_filename",
    "DEFAULT_LANGUAGE_CODE",
    "DEFAULT_VOICE_NAME",
    "DEFAULT_SPEAKING_RATE",
]
