"""Batch segmentation pipeline: JSONL records in, CSV rows out."""

import json
import logging
import re
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import AbstractSet, Iterator, Optional

import pandas as pd
from tqdm import tqdm

from .config import Config
from .dictionary import load_dictionary
from .errors import ResourceExhaustedError
from .models import SegmentationRecord, SegmentationResult
from .segmenter import NShortestPathSegmenter
from .utils import normalize_chinese_text, split_clauses

logger = logging.getLogger(__name__)

FULL_FILE_NAME = "All_Segments"

# Regex pattern for illegal control characters (except tab, newline, carriage return)
ILLEGAL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub('', text)


def iter_records(input_path: Path) -> Iterator[tuple[int, dict]]:
    """Yield (line_number, record) for each decodable JSONL line."""
    with open(input_path, "r", encoding="utf-8") as infile:
        for line_num, line in enumerate(infile, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                logger.warning(f"Skipping undecodable JSON at line {line_num}")
                continue
            if isinstance(record, dict):
                yield line_num, record


def segment_line(
    segmenter: NShortestPathSegmenter,
    text: str,
    line_num: int,
    record_id: str = "",
    use_clauses: bool = True,
) -> SegmentationResult:
    """Segment one input line into output records.

    The line is normalized, optionally split into clauses, and each clause
    segmented on its own. Clauses that blow past the segmenter's path cap
    are logged and skipped.

    Args:
        segmenter: Configured segmentation engine
        text: Raw line text
        line_num: Source line number in the input file
        record_id: Identifier carried into every row
        use_clauses: Split on clause punctuation before segmenting

    Returns:
        SegmentationResult with one record per selected path
    """
    text = normalize_chinese_text(text)
    if use_clauses:
        clauses = split_clauses(text)
    else:
        clauses = [(text, 0, len(text))] if text else []

    records = []
    skipped = 0
    for order, (clause, start, end) in enumerate(clauses, 1):
        try:
            ranked = segmenter.segment_ranked(clause)
        except ResourceExhaustedError as e:
            logger.warning(f"Skipping clause {order} of line {line_num}: {e}")
            skipped += 1
            continue
        for rank, weight, paths in ranked:
            for path in paths:
                records.append(
                    SegmentationRecord(
                        segmentation=path.join(segmenter.delimiter),
                        weight=weight,
                        weight_rank=rank,
                        record_id=record_id,
                        source_line_number=line_num,
                        clause_order=order,
                        start_index=start,
                        end_index=end,
                    )
                )

    return SegmentationResult(
        records=records,
        line_number=line_num,
        clause_count=len(clauses),
        skipped_clauses=skipped,
        record_id=record_id,
    )


def _record_text(record: dict) -> str:
    return record.get("text") or record.get("content") or ""


def _log_skipped_clauses(count: int) -> None:
    if count:
        logger.warning(f"{count} clauses exceeded the path cap and were skipped")


# Segmenter owned by each worker process
_worker_segmenter: Optional[NShortestPathSegmenter] = None


def _init_worker(seg_config: dict, dictionary: frozenset) -> None:
    """Build the per-process segmenter. Must be module-level for pickling."""
    global _worker_segmenter
    _worker_segmenter = NShortestPathSegmenter(
        n_path=seg_config["n_path"],
        dictionary=dictionary,
        max_word_len=seg_config["max_word_len"],
        max_paths=seg_config["max_paths"],
        delimiter=seg_config["delimiter"],
    )


def _process_record_worker(args: tuple) -> Optional[tuple[int, list[dict], int]]:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (line_num, record, use_clauses)

    Returns:
        (line_num, list of row dicts, skipped clause count) or None to skip
    """
    line_num, record, use_clauses = args
    text_content = _record_text(record)
    if not text_content.strip():
        return None
    result = segment_line(
        _worker_segmenter,
        text_content,
        line_num,
        record_id=str(record.get("id", "")),
        use_clauses=use_clauses,
    )
    return line_num, [r.to_row() for r in result.records], result.skipped_clauses


class SegmentationPipeline:
    """Pipeline for segmenting JSONL text files."""

    def __init__(self, config: Config, dictionary: Optional[AbstractSet[str]] = None):
        """Initialize segmentation pipeline.

        Args:
            config: Pipeline configuration
            dictionary: Words to use; loaded from ``config.dictionary.path``
                when omitted
        """
        self.config = config

        if dictionary is None:
            if config.dictionary.path is None:
                raise ValueError("Dictionary path not specified in configuration")
            dictionary = load_dictionary(config.dictionary.path)
        self.dictionary = frozenset(dictionary)

        seg = config.segmentation
        self.segmenter = NShortestPathSegmenter(
            n_path=seg.n_path,
            dictionary=self.dictionary,
            max_word_len=seg.max_word_len,
            max_paths=seg.max_paths,
            delimiter=seg.delimiter,
        )
        logger.info(f"Initialized {self.segmenter}")

    def _setup_output_dirs(self) -> tuple[Path, Path]:
        """Create output directories based on configuration.

        Returns:
            Tuple of (full_files_dir, single_lines_dir)
        """
        full_dir = self.config.output.output_dir / "Full_Files"
        single_dir = self.config.output.output_dir / "Single_Lines"

        if self.config.output.save_full_files:
            full_dir.mkdir(parents=True, exist_ok=True)
        if self.config.output.save_single_lines:
            single_dir.mkdir(parents=True, exist_ok=True)

        return full_dir, single_dir

    @staticmethod
    def _to_frame(rows: list[dict]) -> pd.DataFrame:
        df = pd.DataFrame(rows)
        for col in df.select_dtypes(include=["object"]).columns:
            df[col] = df[col].apply(
                lambda x: sanitize_text(x) if isinstance(x, str) else x
            )
        return df

    def _save_single_line(self, single_dir: Path, line_num: int, rows: list[dict]) -> None:
        if not self.config.output.save_single_lines or not rows:
            return
        self._to_frame(rows).to_csv(single_dir / f"Line_{line_num}.csv", index=False)

    def _save_full_file(self, full_dir: Path, rows: list[dict]) -> Optional[Path]:
        """Save all rows to one CSV file."""
        if not self.config.output.save_full_files or not rows:
            return None
        save_path = full_dir / f"{FULL_FILE_NAME}.csv"
        logger.info(f"Saving {len(rows)} rows to {save_path}")
        self._to_frame(rows).to_csv(save_path, index=False)
        return save_path

    def process_line(self, text: str, line_num: int, record_id: str = "") -> SegmentationResult:
        """Segment a single line of text with the pipeline's segmenter."""
        return segment_line(
            self.segmenter,
            text,
            line_num,
            record_id=record_id,
            use_clauses=self.config.segmentation.split_clauses,
        )

    def _process_file_sequential(
        self, input_path: Path, full_dir: Path, single_dir: Path
    ) -> int:
        """Process file in the current process."""
        all_rows = []
        lines_processed = 0
        skipped_clauses = 0

        records = list(iter_records(input_path))
        for line_num, record in tqdm(records, desc="N-Shortest-Path Segmentation"):
            text_content = _record_text(record)
            if not text_content.strip():
                continue
            try:
                result = self.process_line(
                    text_content, line_num, record_id=str(record.get("id", ""))
                )
            except Exception:
                logger.exception(f"Segmentation error at line {line_num}")
                continue
            skipped_clauses += result.skipped_clauses
            if not result.records:
                continue
            rows = [r.to_row() for r in result.records]
            self._save_single_line(single_dir, line_num, rows)
            all_rows.extend(rows)
            lines_processed += 1

        _log_skipped_clauses(skipped_clauses)
        self._save_full_file(full_dir, all_rows)
        return lines_processed

    def _process_file_parallel(
        self, input_path: Path, full_dir: Path, single_dir: Path
    ) -> int:
        """Process file using multiple worker processes."""
        workers = self.config.segmentation.workers
        seg_config = self.config.segmentation.model_dump()
        use_clauses = self.config.segmentation.split_clauses

        tasks = [
            (line_num, record, use_clauses)
            for line_num, record in iter_records(input_path)
        ]
        results_by_line = {}
        skipped_clauses = 0

        with ProcessPoolExecutor(
            max_workers=workers,
            initializer=_init_worker,
            initargs=(seg_config, self.dictionary),
        ) as executor:
            futures = {
                executor.submit(_process_record_worker, task): task[0]
                for task in tasks
            }
            for future in tqdm(
                as_completed(futures),
                total=len(tasks),
                desc=f"N-Shortest-Path Segmentation ({workers} workers)",
            ):
                line_num = futures[future]
                try:
                    result = future.result()
                except Exception:
                    logger.exception(f"Segmentation error at line {line_num}")
                    continue
                if result is None:
                    continue
                _, rows, skipped = result
                skipped_clauses += skipped
                if rows:
                    results_by_line[line_num] = rows

        _log_skipped_clauses(skipped_clauses)

        all_rows = []
        for line_num in sorted(results_by_line):
            rows = results_by_line[line_num]
            self._save_single_line(single_dir, line_num, rows)
            all_rows.extend(rows)

        self._save_full_file(full_dir, all_rows)
        return len(results_by_line)

    def process_file(self, input_path: Path) -> int:
        """Process a JSONL file and generate segmented output.

        Args:
            input_path: Path to input JSONL file

        Returns:
            Number of lines that produced output rows
        """
        full_dir, single_dir = self._setup_output_dirs()
        logger.info(f"Reading from: {input_path}")

        if self.config.segmentation.workers <= 1:
            lines_processed = self._process_file_sequential(
                input_path, full_dir, single_dir
            )
        else:
            lines_processed = self._process_file_parallel(
                input_path, full_dir, single_dir
            )

        if self.config.output.save_full_files:
            logger.info(f"Full files saved in: {full_dir}")
        if self.config.output.save_single_lines:
            logger.info(f"Individual line files saved in: {single_dir}")
        return lines_processed

    def run(self) -> int:
        """Run the segmentation pipeline.

        Returns:
            Number of lines processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
