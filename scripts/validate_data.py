#!/usr/bin/env python3
"""
validate_data.py - Check a deck source file before shipping it.

Reports, per grade:
- records that fail schema validation
- duplicate characters
- records without pinyin, word groups or sentence

Usage:
  python scripts/validate_data.py
  python scripts/validate_data.py --data path/to/data.json
"""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import ValidationError

from hanzicards.config import load_settings, setup_logging
from hanzicards.schemas import DeckRecord

logger = logging.getLogger(__name__)


def check_grade(block: dict) -> list[str]:
    """Return problems found in one grade block."""
    problems = []
    grade = block.get("grade")
    if not isinstance(grade, str) or not grade:
        return ["grade block without a grade name"]

    characters = block.get("characters")
    if not isinstance(characters, list):
        return [f"{grade}: 'characters' must be a list"]
    if not characters:
        problems.append(f"{grade}: no characters (the app will show the demo deck)")

    seen = Counter()
    for i, raw in enumerate(characters):
        try:
            record = DeckRecord.model_validate(raw)
        except ValidationError as e:
            problems.append(f"{grade}[{i}]: {e.error_count()} validation errors")
            continue
        seen[record.word] += 1
        if not record.pinyin:
            problems.append(f"{grade}[{i}] {record.word}: missing pinyin")
        if not record.words:
            problems.append(f"{grade}[{i}] {record.word}: no word groups")
        if not record.sentence:
            problems.append(f"{grade}[{i}] {record.word}: missing sentence")

    for word, count in seen.items():
        if count > 1:
            problems.append(f"{grade}: {word} appears {count} times")
    return problems


def main():
    settings = load_settings()
    setup_logging(settings.log_level)

    parser = argparse.ArgumentParser(description="Validate a deck source file")
    parser.add_argument(
        "--data",
        type=Path,
        default=settings.data_path,
        help="Path to data.json"
    )
    args = parser.parse_args()

    try:
        with open(args.data, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read {args.data}: {e}")
        sys.exit(1)

    if not isinstance(data, list):
        logger.error("Deck source must be a list of grade blocks")
        sys.exit(1)

    problems = []
    grade_names = Counter()
    for block in data:
        if not isinstance(block, dict):
            problems.append("non-object grade block")
            continue
        grade_names[block.get("grade")] += 1
        problems.extend(check_grade(block))

    for grade, count in grade_names.items():
        if grade and count > 1:
            problems.append(f"grade {grade} defined {count} times (only the first is used)")

    logger.info(f"Checked {len(data)} grades in {args.data}")
    for problem in problems:
        logger.warning(problem)

    if problems:
        logger.error(f"{len(problems)} problems found")
        sys.exit(1)
    logger.info("No problems found")


if __name__ == "__main__":
    main()
