import csv
import io
import os
from contextlib import contextmanager
from typing import Dict, List, Tuple, Union, IO, Hashable

import pandas as pd

from .config import COURSE_SEPARATOR, FIELD_SEPARATOR
from .errors import InputFileError

TextOrPath = Union[str, os.PathLike, IO]


def _source_name(src: TextOrPath) -> str:
    if isinstance(src, (str, os.PathLike)):
        return os.fspath(src)
    return getattr(src, 'name', '<upload>')


@contextmanager
def text_source(src: TextOrPath):
    """Yield a UTF-8 text handle over a path, a text IO object, or a BytesIO buffer.

    Handles opened here are closed on exit; caller-owned streams are not.
    A missing path raises FileNotFoundError and undecodable bytes raise
    InputFileError. Both are OSError, so callers handle them as one
    file-access failure.
    """
    if isinstance(src, (str, os.PathLike)):
        f, owned = open(src, 'r', newline='', encoding='utf-8'), True
    elif isinstance(src, io.BytesIO):
        src.seek(0)
        f, owned = io.TextIOWrapper(src, encoding='utf-8', newline=''), True
    elif hasattr(src, 'read'):
        if getattr(src, 'seekable', lambda: False)():
            src.seek(0)
        f, owned = src, False
    else:
        raise TypeError("Unsupported input type; expected path or file-like object")
    try:
        yield f
    except UnicodeDecodeError as e:
        raise InputFileError(f"{_source_name(src)} is not UTF-8 text ({e.reason})") from e
    finally:
        if owned:
            f.close()


def parse_registration_line(line: str):
    """Split ``STUDENT|C1,C2,...`` into (student, [courses]), or None to skip.

    Course tokens are trimmed, empty tokens dropped, and repeats on the same
    line collapsed so a course never conflicts with itself.
    """
    parts = line.rstrip('\r\n').split(FIELD_SEPARATOR)
    if len(parts) < 2:
        return None
    student = parts[0].strip()
    courses: List[str] = []
    for token in parts[1].split(COURSE_SEPARATOR):
        course = token.strip()
        if course and course not in courses:
            courses.append(course)
    return student, courses


def load_registrations(src: TextOrPath) -> Dict[str, List[str]]:
    """Return student -> courses from a ``STUDENT|C1,C2,...`` file.

    Malformed lines (no course field), blank lines and ``#`` comments are
    skipped. A student listed twice gets the union of both lines. Nothing is
    returned when the file cannot be read to the end.
    """
    students: Dict[str, List[str]] = {}
    with text_source(src) as f:
        for line in f:
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            parsed = parse_registration_line(line)
            if parsed is None:
                continue
            student, courses = parsed
            merged = students.setdefault(student, [])
            merged.extend(c for c in courses if c not in merged)
    return students


def load_edge_list_csv(src: TextOrPath) -> List[Tuple[str, str]]:
    """Conflict pairs from ``course1,course2`` rows; ``#`` rows and self-pairs skipped."""
    edges: List[Tuple[str, str]] = []
    with text_source(src) as f:
        for row in csv.reader(f):
            if len(row) < 2 or row[0].lstrip().startswith('#'):
                continue
            u, v = row[0].strip(), row[1].strip()
            if u and v and u != v:
                edges.append((u, v))
    return edges


def schedule_frame(colors: Dict[Hashable, int]) -> pd.DataFrame:
    """One row per course with its 1-indexed slot, sorted by slot then course."""
    df = pd.DataFrame(
        [(c + 1, str(course)) for course, c in colors.items()],
        columns=['slot', 'course_id'],
    )
    return df.sort_values(['slot', 'course_id']).reset_index(drop=True)


def save_schedule_csv(path: str, colors: Dict[Hashable, int]):
    schedule_frame(colors).to_csv(path, index=False, columns=['course_id', 'slot'])
