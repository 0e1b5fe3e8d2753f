"""
Audio - Pronunciation for study cards.

Looks for a pre-generated MP3 under <audio_dir>/<grade>/ first and falls
back to Google Cloud Text-to-Speech. When neither works the synthesizer
returns None and the page stays silent.
"""

import logging
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_CODE = "cmn-CN"
DEFAULT_VOICE_NAME = "cmn-CN-Wavenet-A"
DEFAULT_SPEAKING_RATE = 0.8


def safe_filename(text: str) -> str:
    """Make text usable as a file name."""
    return text.replace("/", "_").replace("\\", "_").strip() or "_"


def get_audio_path(text: str, audio_dir: Path, grade: Optional[str] = None) -> Path:
    """Location of the cached MP3 for text."""
    base = audio_dir / safe_filename(grade) if grade else audio_dir
    return base / f"{safe_filename(text)}.mp3"


def find_cached_audio(text: str, audio_dir: Path, grade: Optional[str] = None) -> Optional[Path]:
    """
    Get the cached audio file for text.

    Checks the grade directory first, then the shared audio directory.

    Returns:
        Path to audio file if it exists, None otherwise
    """
    candidates = [get_audio_path(text, audio_dir, grade)]
    if grade:
        candidates.append(get_audio_path(text, audio_dir))
    for path in candidates:
        if path.exists():
            return path
    return None


def synthesize_speech(
    client,
    text: str,
    language_code: str = DEFAULT_LANGUAGE_CODE,
    voice_name: str = DEFAULT_VOICE_NAME,
    speaking_rate: float = DEFAULT_SPEAKING_RATE,
) -> bytes:
    """
    Synthesize text to MP3 bytes with Google Cloud TTS.

    Raises whatever the client raises.
    """
    from google.cloud import texttospeech

    synthesis_input = texttospeech.SynthesisInput(text=text)
    voice = texttospeech.VoiceSelectionParams(
        language_code=language_code,
        name=voice_name,
    )
    audio_config = texttospeech.AudioConfig(
        audio_encoding=texttospeech.AudioEncoding.MP3,
        speaking_rate=speaking_rate,
    )
    response = client.synthesize_speech(
        input=synthesis_input,
        voice=voice,
        audio_config=audio_config,
    )
    return response.audio_content


class SpeechSynthesizer:
    """
    Produce MP3 bytes for a piece of text.

    The Cloud TTS client is created on first use. If the library or
    credentials are missing, synthesis is disabled for the rest of the
    session and only cached files are played.
    """

    def __init__(
        self,
        audio_dir: Optional[Path] = None,
        language_code: str = DEFAULT_LANGUAGE_CODE,
        voice_name: str = DEFAULT_VOICE_NAME,
        speaking_rate: float = DEFAULT_SPEAKING_RATE,
        client=None,
    ):
        self.audio_dir = Path(audio_dir) if audio_dir else None
        self.language_code = language_code
        self.voice_name = voice_name
        self.speaking_rate = speaking_rate
        self._client = client
        self._client_failed = False

    def _get_client(self):
        if self._client is not None or self._client_failed:
            return self._client
        try:
            from google.cloud import texttospeech
            self._client = texttospeech.TextToSpeechClient()
        except Exception as e:
            logger.warning(f"Speech synthesis unavailable: {e}")
            self._client_failed = True
        return self._client

    @property
    def available(self) -> bool:
        """Whether live synthesis can be attempted."""
        return self._get_client() is not None

    def speak(self, text: str, grade: Optional[str] = None) -> Optional[bytes]:
        """
        Get MP3 bytes for text.

        Returns:
            Audio bytes, or None if no cached file exists and synthesis failed
        """
        if not text:
            return None

        if self.audio_dir is not None:
            cached = find_cached_audio(text, self.audio_dir, grade)
            if cached:
                return cached.read_bytes()

        client = self._get_client()
        if client is None:
            return None

        try:
            return synthesize_speech(
                client,
                text,
                language_code=self.language_code,
                voice_name=self.voice_name,
                speaking_rate=self.speaking_rate,
            )
        except Exception as e:
            logger.warning(f"TTS synthesis failed for {text!r}: {e}")
            return None

    def __call__(self, text: str) -> Optional[bytes]:
        return self.speak(text)
