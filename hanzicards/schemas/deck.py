"""
Deck schemas for HanziCards.

Defines Pydantic models for deck content:
- Raw records as they appear in data.json
- Normalized character entries used at runtime
"""

from pydantic import BaseModel, ConfigDict, Field


class CharacterEntry(BaseModel):
    """One study card. Identity is the character value."""
    model_config = ConfigDict(frozen=True)

    character: str = Field(min_length=1)
    pinyin: str = ""
    word_groups: list[str] = []
    sentence: str = ""


class DeckRecord(BaseModel):
    """Character record in the data source format."""
    word: str = Field(min_length=1)
    pinyin: str = ""
    words: list[str] = []
    sentence: str = ""

    def to_entry(self) -> CharacterEntry:
        return CharacterEntry(
            character=self.word,
            pinyin=self.pinyin,
            word_groups=list(self.words),
            sentence=self.sentence,
        )


class GradeDeck(BaseModel):
    """Grade block in the data source: {grade, characters[]}."""
    grade: str
    characters: list[DeckRecord]


DEMO_DECK: tuple[CharacterEntry, ...] = (
    CharacterEntry(character="天", pinyin="tiān", word_groups=["天空", "今天"], sentence="蓝蓝的天空像大海。"),
    CharacterEntry(character="地", pinyin="dì", word_groups=["大地", "土地"], sentence="大地妈妈真温暖。"),
    CharacterEntry(character="人", pinyin="rén", word_groups=["人们", "好人"], sentence="人们都在努力工作。"),
    CharacterEntry(character="你", pinyin="nǐ", word_groups=["你好", "你们"], sentence="你们好，新同学！"),
    CharacterEntry(character="我", pinyin="wǒ", word_groups=["我们", "自我"], sentence="我们是一年级学生。"),
)
