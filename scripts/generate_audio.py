#!/usr/bin/env python3
"""
generate_audio.py - Pre-generate pronunciation audio for a deck.

Writes one MP3 per character to data/audio/<grade>/<character>.mp3 so the
app can play pronunciations without calling the TTS API at study time.

Usage:
  python scripts/generate_audio.py                       # All grades
  python scripts/generate_audio.py --grade 一年级上册     # One grade
  python scripts/generate_audio.py --skip-existing       # Skip existing audio files
  python scripts/generate_audio.py --list-voices         # Show Mandarin voices

Prerequisites:
  Set GOOGLE_APPLICATION_CREDENTIALS to a service account JSON file path
  OR run `gcloud auth application-default login`
"""

import argparse
import logging
import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from hanzicards.classroom import DeckLoader
from hanzicards.config import load_settings, setup_logging
from hanzicards.viewer.audio import get_audio_path, synthesize_speech

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Google Cloud TTS
# -----------------------------------------------------------------------------

def get_tts_client():
    """Get Google Cloud TTS client."""
    try:
        from google.cloud import texttospeech
        return texttospeech.TextToSpeechClient()
    except Exception as e:
        logger.error(f"Failed to initialize Google Cloud TTS client: {e}")
        logger.error("Make sure GOOGLE_APPLICATION_CREDENTIALS is set or you're authenticated via gcloud")
        raise


def list_available_voices(client, language_code: str):
    """List available voices for a language."""
    from google.cloud import texttospeech

    response = client.list_voices(language_code=language_code)

    logger.info(f"Available {language_code} voices:")
    for voice in response.voices:
        ssml_gender = texttospeech.SsmlVoiceGender(voice.ssml_gender).name
        logger.info(f"  {voice.name} ({ssml_gender})")


def generate_grade(client, loader: DeckLoader, grade: str, args) -> dict:
    """
    Generate audio for every character of a grade.

    Returns:
        Counts of generated, skipped and failed characters
    """
    counts = {"generated": 0, "skipped": 0, "failed": 0}
    deck = loader.get_grade_deck(grade)
    if not deck:
        logger.warning(f"No characters for grade {grade}, skipping")
        return counts

    for i, entry in enumerate(deck, 1):
        audio_path = get_audio_path(entry.character, args.output, grade)

        if args.skip_existing and audio_path.exists():
            counts["skipped"] += 1
            continue

        logger.info(f"[{grade} {i}/{len(deck)}] {entry.character} ({entry.pinyin})")
        try:
            audio = synthesize_speech(
                client,
                entry.character,
                language_code=args.language,
                voice_name=args.voice,
                speaking_rate=args.speaking_rate,
            )
        except Exception as e:
            logger.error(f"TTS synthesis failed for {entry.character}: {e}")
            counts["failed"] += 1
            continue

        audio_path.parent.mkdir(parents=True, exist_ok=True)
        audio_path.write_bytes(audio)
        counts["generated"] += 1

        # Rate limiting
        if args.delay > 0:
            time.sleep(args.delay)

    return counts


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    settings = load_settings()
    setup_logging(settings.log_level)

    parser = argparse.ArgumentParser(
        description="Generate pronunciation audio for deck characters using Google Cloud TTS",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Authentication:
  Set GOOGLE_APPLICATION_CREDENTIALS to a service account JSON file path
  OR run: gcloud auth application-default login

Example:
  python scripts/generate_audio.py --grade 一年级上册 --voice cmn-CN-Wavenet-B
        """
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=settings.data_path,
        help="Path to data.json"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.audio_dir,
        help="Output directory for audio files"
    )
    parser.add_argument(
        "--grade",
        type=str,
        default=None,
        help="Only generate audio for this grade"
    )
    parser.add_argument(
        "--language",
        type=str,
        default=settings.tts_language,
        help=f"Language code (default: {settings.tts_language})"
    )
    parser.add_argument(
        "--voice",
        type=str,
        default=settings.tts_voice,
        help=f"Google Cloud TTS voice name (default: {settings.tts_voice})"
    )
    parser.add_argument(
        "--speaking-rate",
        type=float,
        default=settings.speaking_rate,
        help=f"Speaking rate, 0.25-4.0 (default: {settings.speaking_rate})"
    )
    parser.add_argument(
        "--skip-existing",
        action="store_true",
        help="Skip characters that already have audio files"
    )
    parser.add_argument(
        "--list-voices",
        action="store_true",
        help="List available voices and exit"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.1,
        help="Delay between API calls in seconds (default: 0.1)"
    )

    args = parser.parse_args()

    logger.info("Initializing Google Cloud TTS client...")
    try:
        client = get_tts_client()
    except Exception:
        sys.exit(1)

    if args.list_voices:
        list_available_voices(client, args.language)
        return

    if not args.data.exists():
        logger.error(f"Deck source not found: {args.data}")
        sys.exit(1)

    loader = DeckLoader(args.data)
    grades = [args.grade] if args.grade else loader.get_grades()
    if not grades:
        logger.warning("No grades found in deck source")
        return

    totals = {"generated": 0, "skipped": 0, "failed": 0}
    for grade in grades:
        counts = generate_grade(client, loader, grade, args)
        for key, value in counts.items():
            totals[key] += value

    # Summary
    logger.info("=" * 50)
    logger.info("AUDIO GENERATION COMPLETE")
    logger.info("=" * 50)
    logger.info(f"Grades: {len(grades)}")
    logger.info(f"Generated: {totals['generated']}")
    logger.info(f"Skipped: {totals['skipped']}")
    logger.info(f"Failed: {totals['failed']}")
    logger.info(f"Output directory: {args.output}")


if __name__ == "__main__":
    main()
