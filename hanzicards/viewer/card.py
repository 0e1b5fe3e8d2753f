"""
Card renderer - HTML fragments for the study page.

Provides:
- Character card with pinyin, word groups and sentence
- Memory hints per character status
- Learning statistics
- Slider cards for review/mastered browsing
"""

import html
from typing import Optional

from hanzicards.schemas import CharacterEntry, CharacterStatus


# Static hint text; no scheduling happens behind it
STATUS_HINTS = {
    CharacterStatus.MASTERED: "恭喜！这个生字您已经标记为完全掌握。根据艾宾浩斯记忆法，建议31天后进行一次最终复习以巩固长期记忆。",
    CharacterStatus.REVIEW: "这个生字您标记为需要复习。根据艾宾浩斯记忆法，建议在1小时后、9小时后和1天后分别进行复习。",
    CharacterStatus.LEARNED: "这个生字您已经学习过。根据艾宾浩斯记忆法，建议在20分钟后进行一次复习以巩固记忆。",
    CharacterStatus.NEW: "这是您第一次学习这个生字。根据艾宾浩斯记忆法，请在20分钟后复习一次，然后按照计划进行后续复习。",
}

STATUS_LABELS = {
    CharacterStatus.NEW: "未学习",
    CharacterStatus.LEARNED: "已学习",
    CharacterStatus.REVIEW: "需复习",
    CharacterStatus.MASTERED: "已掌握",
}

STATUS_CLASSES = {
    CharacterStatus.NEW: "status-new",
    CharacterStatus.LEARNED: "status-learned",
    CharacterStatus.REVIEW: "status-review",
    CharacterStatus.MASTERED: "status-mastered",
}


def get_card_css() -> str:
    """Get CSS styles for card display."""
    return """
    <style>
    .hanzi-card {
        background: #fffdf7;
        border-radius: 16px;
        padding: 1.5em;
        text-align: center;
        border: 2px solid #f0e6d2;
    }
    .hanzi-character {
        font-size: 6em;
        line-height: 1.2em;
        font-family: "KaiTi", "STKaiti", "Noto Serif SC", serif;
        color: #333;
    }
    .hanzi-pinyin {
        font-size: 1.6em;
        color: #1976D2;
        margin-bottom: 0.6em;
    }
    .word-groups {
        display: flex;
        justify-content: center;
        flex-wrap: wrap;
        gap: 0.5em;
        margin: 0.8em 0;
    }
    .word-group {
        background: #e3f2fd;
        border-radius: 8px;
        padding: 0.3em 0.8em;
        font-size: 1.2em;
    }
    .hanzi-sentence {
        font-size: 1.15em;
        color: #555;
        margin-top: 0.6em;
    }
    .status-badge {
        display: inline-block;
        border-radius: 10px;
        padding: 0.1em 0.7em;
        font-size: 0.85em;
        margin-bottom: 0.5em;
    }
    .status-new { background: #eceff1; color: #546E7A; }
    .status-learned { background: #e3f2fd; color: #1565C0; }
    .status-review { background: #fff3e0; color: #e65100; }
    .status-mastered { background: #e8f5e9; color: #388E3C; }
    .hint-box {
        background: #fff8e1;
        border-left: 4px solid #FFB300;
        border-radius: 8px;
        padding: 0.8em 1em;
        margin: 1em 0;
        color: #5d4037;
    }
    .stats-row {
        display: flex;
        justify-content: space-around;
        text-align: center;
    }
    .stats-value {
        font-size: 1.6em;
        font-weight: 700;
    }
    .stats-label {
        color: #666;
        font-size: 0.9em;
    }
    .slider-card {
        background: white;
        border: 1px solid #ddd;
        border-radius: 10px;
        padding: 0.6em;
        text-align: center;
    }
    .slider-character {
        font-size: 2.4em;
        font-family: "KaiTi", "STKaiti", "Noto Serif SC", serif;
    }
    .slider-pinyin {
        color: #1976D2;
    }
    </style>
    """


def hint_for_status(status: CharacterStatus) -> str:
    """Memory hint shown under the card."""
    return STATUS_HINTS[CharacterStatus(status)]


def render_status_badge(status: CharacterStatus) -> str:
    status = CharacterStatus(status)
    return f'<span class="status-badge {STATUS_CLASSES[status]}">{STATUS_LABELS[status]}</span>'


def render_word_groups(word_groups: list[str]) -> str:
    """Render word groups as inline chips."""
    spans = ''.join(
        f'<span class="word-group">{html.escape(word)}</span>'
        for word in word_groups
    )
    return f'<div class="word-groups">{spans}</div>'


def render_card(entry: CharacterEntry, status: Optional[CharacterStatus] = None) -> str:
    """
    Render the main study card.

    Args:
        entry: Character to show
        status: Optional status for the badge

    Returns:
        HTML string for the card
    """
    parts = ['<div class="hanzi-card">']
    if status is not None:
        parts.append(render_status_badge(status))
    parts.append(f'<div class="hanzi-character">{html.escape(entry.character)}</div>')
    parts.append(f'<div class="hanzi-pinyin">{html.escape(entry.pinyin)}</div>')
    parts.append(render_word_groups(entry.word_groups))
    parts.append(f'<div class="hanzi-sentence">{html.escape(entry.sentence)}</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_empty_card() -> str:
    """Card shown when the deck has no characters."""
    return (
        '<div class="hanzi-card">'
        '<div class="hanzi-character">无</div>'
        '<div class="hanzi-sentence">暂无数据</div>'
        '</div>'
    )


def render_hint(status: CharacterStatus) -> str:
    return f'<div class="hint-box">{html.escape(hint_for_status(status))}</div>'


def render_stats(stats: dict) -> str:
    """Render the total/learned/review/mastered counters."""
    items = [
        ("total", "生字总数"),
        ("learned", "已学习"),
        ("review", "需复习"),
        ("mastered", "已掌握"),
    ]
    parts = ['<div class="stats-row">']
    for key, label in items:
        parts.append(
            f'<div><div class="stats-value">{stats.get(key, 0)}</div>'
            f'<div class="stats-label">{label}</div></div>'
        )
    parts.append('</div>')
    return ''.join(parts)


def render_slider_card(entry: CharacterEntry) -> str:
    """Small card used in the review/mastered slider."""
    return (
        '<div class="slider-card">'
        f'<div class="slider-character">{html.escape(entry.character)}</div>'
        f'<div class="slider-pinyin">{html.escape(entry.pinyin)}</div>'
        '</div>'
    )
