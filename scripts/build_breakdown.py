#!/usr/bin/env python3
"""
build_breakdown.py - Build a task breakdown from extracted material text.

Reads a plain-text file produced by document extraction, chunks it (reading)
or detects its questions (homework) for a grade, and writes the breakdown
JSON stored with the task.

Usage:
  python scripts/build_breakdown.py material.txt --grade G5 --kind reading
  python scripts/build_breakdown.py worksheet.txt --grade 8 --kind homework --use-ai
  python scripts/build_breakdown.py material.txt --grade K --output breakdown.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from studypace import prepare_task
from studypace.engine import grade_display_name
from studypace.generation import DeterministicFallback, create_generator
from studypace.schemas import ExtractedText, InvalidGradeError, parse_grade

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Build a reading or homework breakdown from extracted text",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Plain-text file with the extracted material"
    )
    parser.add_argument(
        "--grade",
        required=True,
        help="Grade level: K, G1-G12 or a bare number"
    )
    parser.add_argument(
        "--kind",
        choices=["reading", "homework"],
        default="reading",
        help="Task kind (default: reading)"
    )
    parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Page count of the source document"
    )
    parser.add_argument(
        "--use-ai",
        action="store_true",
        help="Try the Gemini model first (needs GEMINI_API_KEY)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write JSON here instead of stdout"
    )

    args = parser.parse_args()

    try:
        grade = parse_grade(args.grade)
    except InvalidGradeError as e:
        parser.error(str(e))

    if not args.input.exists():
        parser.error(f"Input file not found: {args.input}")

    material = ExtractedText.from_text(
        args.input.read_text(encoding="utf-8"),
        page_count=args.pages,
        title=args.input.stem,
    )
    logger.info(f"Loaded {args.input}: {material.word_count} words, {material.page_count} pages")

    generator = create_generator() if args.use_ai else DeterministicFallback()
    task = prepare_task(material, grade, args.kind, generator=generator)

    logger.info(
        f"{grade_display_name(grade)} {task.kind.value.lower()}: "
        f"{task.unit_count} units, ~{task.etc_minutes} minutes"
    )

    result = {
        "kind": task.kind.value,
        "grade": task.grade.value,
        "etcMinutes": task.etc_minutes,
        "breakdown": task.breakdown_payload(),
    }
    output = json.dumps(result, ensure_ascii=False, indent=2)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info(f"Output: {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
