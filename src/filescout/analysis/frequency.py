"""Word-frequency analysis split across a fixed-size worker pool.

The token stream of one file is cut into contiguous segments, one per
worker. Each worker counts its own segment into a private table, the
tables are summed, and the merged table is ranked by count descending,
then by word ascending. Because summing is commutative and the ranking
is total, the result does not depend on worker count or completion order.
"""

from __future__ import annotations

import heapq
import logging
from collections import Counter
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Iterable, List, Sequence

from filescout.config import DEFAULT_MAX_WORKERS, DEFAULT_TOP_K, WORKER_LIMIT
from filescout.errors import AnalysisFailure, ValidationError
from filescout.models import AnalysisTask, WordCount
from filescout.utils.text import iter_tokens

LOGGER = logging.getLogger(__name__)


def validate_worker_count(worker_count: object, *, max_workers: int = DEFAULT_MAX_WORKERS) -> int:
    # bool is an int subclass but never a meaningful worker count
    if isinstance(worker_count, bool) or not isinstance(worker_count, int):
        raise ValidationError(f"Worker count must be an integer, got {worker_count!r}")
    max_workers = min(max_workers, WORKER_LIMIT)
    if not 1 <= worker_count <= max_workers:
        raise ValidationError(
            f"Worker count must be between 1 and {max_workers}, got {worker_count}"
        )
    return worker_count


def partition_tokens(tokens: Sequence[str], worker_count: int) -> List[AnalysisTask]:
    """Split tokens into ``worker_count`` contiguous segments.

    Every segment has ``len(tokens) // worker_count`` tokens except the
    last, which also takes the remainder. With more workers than tokens
    the leading segments are empty.
    """
    size = len(tokens) // worker_count
    tasks = []
    for index in range(worker_count):
        start = index * size
        end = len(tokens) if index == worker_count - 1 else start + size
        tasks.append(AnalysisTask(index=index, tokens=tuple(tokens[start:end])))
    return tasks


def count_segment(task: AnalysisTask) -> Counter:
    return Counter(task.tokens)


def merge_tables(tables: Iterable[Counter]) -> Counter:
    total: Counter = Counter()
    for table in tables:
        total.update(table)
    return total


def rank_words(table: Counter, *, top_k: int = DEFAULT_TOP_K) -> List[WordCount]:
    ranked = heapq.nsmallest(top_k, table.items(), key=lambda item: (-item[1], item[0]))
    return [WordCount(word, count) for word, count in ranked]


class WordFrequencyAnalyzer:
    """Counts the most frequent words of a text with N parallel workers."""

    def __init__(self, *, max_workers: int = DEFAULT_MAX_WORKERS, top_k: int = DEFAULT_TOP_K) -> None:
        self.max_workers = max_workers
        self.top_k = top_k

    def analyze(self, text: str, worker_count: int) -> List[WordCount]:
        worker_count = validate_worker_count(worker_count, max_workers=self.max_workers)
        tokens = list(iter_tokens(text))
        tasks = partition_tokens(tokens, worker_count)

        with ThreadPoolExecutor(
            max_workers=worker_count, thread_name_prefix="filescout-worker"
        ) as pool:
            futures = [pool.submit(count_segment, task) for task in tasks]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()

            tables = []
            for future in futures:
                if future not in done:
                    continue
                exc = future.exception()
                if exc is not None:
                    raise AnalysisFailure(f"Word-frequency worker failed: {exc}") from exc
                tables.append(future.result())

        LOGGER.debug(
            "Counted %d tokens with %d workers (segments: %s)",
            len(tokens),
            worker_count,
            [len(task.tokens) for task in tasks],
        )
        return rank_words(merge_tables(tables), top_k=self.top_k)
