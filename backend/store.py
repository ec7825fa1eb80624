"""
In-memory lecture registry.

Lectures live in a plain ordered list for the lifetime of the process, no DB.
The app owns one LectureStore (see main.create_app) and routes reach it via
the get_store dependency, so tests can build an isolated store per app.
"""

import logging
import re
import uuid
from typing import Iterable

from fastapi import Request

from models.lecture import Lecture

logger = logging.getLogger(__name__)

NOTES_URL_TEMPLATE = "https://example.com/notes/{slug}.txt"
TRANSCRIPT_URI_TEMPLATE = "s3://dummy-bucket/transcripts/{lecture_id}.txt"
TRANSCRIPT_PREVIEW_CHARS = 50

SEED_LECTURES: tuple[Lecture, ...] = (
    Lecture(
        lecture_id="10e51729-b2ae-489a-b88e-206e898fab41",
        title="CloudLecture V8",
        notes="https://example.com/notes/cloud-lecture-v8.txt",
    ),
    Lecture(
        lecture_id="139c2798-2c3b-486a-9113-af9fcf13841c",
        title="cloudLecture4",
        notes="https://example.com/notes/cloud-lecture-4.txt",
    ),
    Lecture(
        lecture_id="a2b1e8d0-5c6f-4a7b-9d8e-1f2a3b4c5d6e",
        title="Pokemon TestLecture V3",
        notes="https://example.com/notes/pokemon-lecture-v3.txt",
    ),
    Lecture(
        lecture_id="f1e2d3c4-b5a6-7890-1234-567890abcdef",
        title="Pokemon TestLecture V7",
        notes="https://example.com/notes/pokemon-lecture-v7.txt",
    ),
)

_WHITESPACE_RUN = re.compile(r"\s+")


def notes_url(title: str) -> str:
    """Dummy notes link: whitespace runs in the title collapse to one hyphen."""
    return NOTES_URL_TEMPLATE.format(slug=_WHITESPACE_RUN.sub("-", title))


def transcript_uri(lecture_id: str) -> str:
    return TRANSCRIPT_URI_TEMPLATE.format(lecture_id=lecture_id)


class LectureStore:
    """Ordered, append-only collection of lectures (oldest first)."""

    def __init__(self, seed: Iterable[Lecture] = SEED_LECTURES) -> None:
        self._lectures: list[Lecture] = list(seed)
        self._ids: set[str] = {lecture.lecture_id for lecture in self._lectures}

    def __len__(self) -> int:
        return len(self._lectures)

    def list(self) -> list[Lecture]:
        return list(self._lectures)

    def add(self, title: str, source_text: str) -> Lecture:
        """
        Registers a new lecture and returns it.

        The transcript text is not kept anywhere; processing is only
        simulated, so just a short preview ends up in the debug log.
        """
        logger.debug(
            'Transcript content (first %d chars): "%s..."',
            TRANSCRIPT_PREVIEW_CHARS,
            source_text[:TRANSCRIPT_PREVIEW_CHARS],
        )

        lecture_id = str(uuid.uuid4())
        while lecture_id in self._ids:
            lecture_id = str(uuid.uuid4())

        lecture = Lecture(lecture_id=lecture_id, title=title, notes=notes_url(title))
        self._lectures.append(lecture)
        self._ids.add(lecture_id)
        return lecture


def get_store(request: Request) -> LectureStore:
    """FastAPI dependency: the store owned by the running app."""
    return request.app.state.lecture_store
