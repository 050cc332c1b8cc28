"""Text encoding, decoding and comparison of stats records.

A record is a single comma separated line::

    url,requests,successes,failures,p50,p90,p99

with the percentiles written with exactly three decimals.
"""
from typing import List, TextIO, Union
from pathlib import Path

from .models import Stats, StatsDelta
from .exceptions import MalformedRecordError


FIELD_COUNT = 7


def encode_stats(stats: Stats) -> str:
    """Encode a stats record as one line, without the line terminator."""
    return (
        f"{stats.url},{stats.requests},{stats.successes},{stats.failures},"
        f"{stats.p50:.3f},{stats.p90:.3f},{stats.p99:.3f}"
    )


def _decode_line(line: str) -> Stats:
    # Only the url may contain commas; the six trailing fields are numeric.
    fields = line.rsplit(",", FIELD_COUNT - 1)
    if len(fields) != FIELD_COUNT:
        raise MalformedRecordError(f"want {FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    url, requests, successes, failures, p50, p90, p99 = fields
    try:
        return Stats(
            url=url,
            requests=int(requests),
            successes=int(successes),
            failures=int(failures),
            p50=float(p50),
            p90=float(p90),
            p99=float(p99),
        )
    except ValueError as e:
        raise MalformedRecordError(f"invalid stats record {line!r}") from e


def decode_stats(text: str) -> List[Stats]:
    """Decode every non-blank line of text into a stats record.

    Raises:
        MalformedRecordError: If a line has a missing field or a field fails
            numeric parsing.
    """
    return [_decode_line(line) for line in text.splitlines() if line.strip()]


def write_stats_file(stream: TextIO, stats: Stats) -> None:
    """Write one stats record to a text stream."""
    stream.write(encode_stats(stats) + "\n")


def read_stats_file(stream: TextIO) -> List[Stats]:
    """Read every stats record from a text stream."""
    return decode_stats(stream.read())


def compare_stats(first: Stats, second: Stats) -> StatsDelta:
    """Return second minus first, field by field."""
    return StatsDelta(
        p50=second.p50 - first.p50,
        p90=second.p90 - first.p90,
        p99=second.p99 - first.p99,
        requests=second.requests - first.requests,
        successes=second.successes - first.successes,
        failures=second.failures - first.failures,
    )


def _first_record(path: Union[str, Path]) -> Stats:
    with open(path, "r") as f:
        records = read_stats_file(f)
    if not records:
        raise MalformedRecordError(f"no stats record found in {path}")
    return records[0]


def compare_stats_files(path1: Union[str, Path], path2: Union[str, Path]) -> StatsDelta:
    """Compare the first record of two stats files.

    Raises:
        OSError: If either file cannot be read.
        MalformedRecordError: If either file holds no valid record.
    """
    return compare_stats(_first_record(path1), _first_record(path2))
