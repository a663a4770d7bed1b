"""Micro-benchmark of the parse / format / filter operations."""
from __future__ import annotations

import time
from dataclasses import asdict, dataclass

from ..api import filter_recent_articles, format_article_date, parse_rss_date

SAMPLE_DATES: list[str] = [
    "2025-05-30T05:00:00Z",
    "Fri, 30 May 2025 05:00:00 GMT",
    "2025-05-30 05:00:00",
    "2025-05-30T05:00:00.123Z",
]


@dataclass
class BenchmarkResult:
    iterations: int
    parse_ms: float
    format_ms: float
    filter_ms: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def run_benchmark(iterations: int = 10_000, articles: int = 1000) -> BenchmarkResult:
    """Time each operation; filtering runs ``iterations // 100`` passes over ``articles`` items."""
    batch = [
        {"id": str(i), "pubDate": SAMPLE_DATES[i % len(SAMPLE_DATES)]}
        for i in range(articles)
    ]

    start = time.perf_counter()
    for i in range(iterations):
        parse_rss_date(SAMPLE_DATES[i % len(SAMPLE_DATES)])
    parse_ms = (time.perf_counter() - start) * 1000

    now_ms = time.time() * 1000
    start = time.perf_counter()
    for _ in range(iterations):
        format_article_date(now_ms, now=now_ms)
    format_ms = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    for _ in range(max(1, iterations // 100)):
        filter_recent_articles(batch, lambda a: a["pubDate"])
    filter_ms = (time.perf_counter() - start) * 1000

    return BenchmarkResult(iterations, parse_ms, format_ms, filter_ms)
