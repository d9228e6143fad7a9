"""
Command line entry point.

Extracts the outline (and optionally the full text and a persona analysis)
of every PDF in an input directory, writing one JSON file per document.
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_DIR
from .errors import DocumentLoadError
from .session import Session

logger = logging.getLogger(__name__)


def write_json(data: Dict[str, Any], path: Path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=4, ensure_ascii=False)


def analysis_report(session: Session, persona: str, job: str) -> Dict[str, Any]:
    """Run an analysis and wrap it with the request metadata."""
    result = session.analyze(persona, job)
    if not result.ok:
        logger.warning(result.message)

    report = {
        "document": session.record.filename,
        "persona": persona,
        "job": job,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    report.update(result.to_dict())
    return report


def process_pdf(session: Session, pdf_file: Path, output_path: Path,
                full_text: bool = False, persona: Optional[str] = None,
                job: Optional[str] = None):
    """Extract one PDF and write its outputs next to each other."""
    record = session.load_file(str(pdf_file))

    output_file = output_path / f"{pdf_file.stem}.json"
    write_json(record.outline.to_dict(), output_file)
    logger.info(f"Successfully extracted structure to {output_file}")

    if full_text:
        text_file = output_path / f"{pdf_file.stem}.txt"
        text_file.write_text(record.full_text, encoding='utf-8')

    if persona is not None or job is not None:
        write_json(analysis_report(session, persona or "", job or ""),
                   output_path / f"{pdf_file.stem}_analysis.json")


def main(input_dir: str, output_dir: str, single: Optional[str] = None,
         full_text: bool = False, persona: Optional[str] = None,
         job: Optional[str] = None) -> int:
    """
    Process PDF files and save structured output.

    Returns:
        Process exit status
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    if single:
        pdf_files: List[Path] = [Path(single)]
    else:
        pdf_files = sorted(Path(input_dir).glob("*.pdf"))

    if not pdf_files:
        logger.warning(f"No PDF files found in {input_dir}")
        return 1

    successful = 0
    with Session() as session:
        for pdf_file in pdf_files:
            try:
                process_pdf(session, pdf_file, output_path, full_text, persona, job)
                successful += 1
            except DocumentLoadError as e:
                logger.error(f"Failed to process {pdf_file.name}: {e}")
            except Exception as e:
                logger.exception(f"Failed to process {pdf_file.name}: {e}")

    logger.info(f"Successfully processed: {successful}/{len(pdf_files)} files")
    return 0 if successful else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract document outlines from PDF files.")
    parser.add_argument("input_dir", nargs="?", default=DEFAULT_INPUT_DIR,
                        help="Directory containing input PDF files.")
    parser.add_argument("output_dir", nargs="?", default=DEFAULT_OUTPUT_DIR,
                        help="Directory to save the output files.")
    parser.add_argument("--single", help="Process a single PDF file instead of a directory.")
    parser.add_argument("--full-text", action="store_true",
                        help="Also write the reconstructed text of each PDF.")
    parser.add_argument("--persona", help="Persona for relevance analysis.")
    parser.add_argument("--job", help="Job to be done for relevance analysis.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    return main(args.input_dir, args.output_dir, args.single,
                args.full_text, args.persona, args.job)


if __name__ == "__main__":
    sys.exit(run())
