#!/usr/bin/env python3
"""
estimate_materials.py - Batch time estimates for a folder of materials.

For every extracted .txt file and every requested grade, records word
count, reading chunks, detected questions and estimated minutes, then
writes one CSV row per (file, grade).

Usage:
  python scripts/estimate_materials.py data/materials
  python scripts/estimate_materials.py data/materials --grades K,G3,G8,G12
  python scripts/estimate_materials.py data/materials --output reports/estimates.csv
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd

from studypace.engine import (
    chunk_reading_for_grade,
    detect_questions,
    estimate_homework_minutes,
    estimate_reading_minutes,
    grade_display_name,
)
from studypace.schemas import GRADE_LEVELS, ExtractedText, InvalidGradeError, parse_grade

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = PROJECT_ROOT / "data" / "reports" / "material_estimates.csv"


def estimate_material(material: ExtractedText, name: str, grade) -> dict:
    """One report row for a material at a grade."""
    chunks = chunk_reading_for_grade(material.text, grade)
    questions = detect_questions(material.text)
    return {
        "material": name,
        "grade": grade.value,
        "grade_name": grade_display_name(grade),
        "words": material.word_count,
        "chunks": len(chunks),
        "longest_chunk_words": max((c.word_count for c in chunks), default=0),
        "chunk_minutes": sum(c.est_minutes for c in chunks),
        "reading_minutes": estimate_reading_minutes(material.word_count, grade),
        "questions": len(questions),
        "homework_minutes": round(estimate_homework_minutes(questions, grade), 1),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Estimate reading and homework time for extracted materials",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "input_dir",
        type=Path,
        help="Directory of extracted .txt files"
    )
    parser.add_argument(
        "--grades",
        type=str,
        help="Comma-separated grades (default: all grades)"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"CSV report path (default: {DEFAULT_OUTPUT})"
    )

    args = parser.parse_args()

    if args.grades:
        try:
            grades = [parse_grade(g) for g in args.grades.split(",") if g.strip()]
        except InvalidGradeError as e:
            parser.error(str(e))
    else:
        grades = list(GRADE_LEVELS)

    files = sorted(args.input_dir.glob("*.txt"))
    logger.info(f"Found {len(files)} materials in {args.input_dir}")
    if not files:
        return

    rows = []
    failed = []
    for i, path in enumerate(files, 1):
        logger.info(f"[{i}/{len(files)}] {path.name}")
        try:
            material = ExtractedText.from_text(path.read_text(encoding="utf-8"))
            for grade in grades:
                rows.append(estimate_material(material, path.stem, grade))
        except Exception as e:
            logger.error(f"  ✗ Error estimating {path.name}: {e}")
            failed.append(path.name)

    df = pd.DataFrame(rows)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)

    # Summary
    logger.info("\n" + "=" * 50)
    logger.info("SUMMARY")
    logger.info("=" * 50)
    logger.info(f"Materials: {len(files) - len(failed)} estimated, {len(failed)} failed")
    if not df.empty:
        by_grade = df.groupby("grade", sort=False)["reading_minutes"].mean().round(1)
        for grade, minutes in by_grade.items():
            logger.info(f"  {grade}: {minutes} reading minutes on average")
    logger.info(f"Output: {args.output}")


if __name__ == "__main__":
    main()
