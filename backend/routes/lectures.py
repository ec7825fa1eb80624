import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from models.lecture import ListLecturesResponse, UploadTranscriptResponse
from store import LectureStore, get_store, transcript_uri

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lectures"])

UPLOAD_BAD_REQUEST = (
    "Bad Request: 'lectureTitle' query parameter and a raw text body are required."
)
UPLOAD_ACCEPTED = "Transcript uploaded and processing triggered."


# ---------- Endpoints ----------

@router.get("/listLectures", response_model=ListLecturesResponse)
async def list_lectures(lecture_store: LectureStore = Depends(get_store)):
    """
    Returns every known lecture, oldest first.
    """
    lectures = lecture_store.list()
    logger.info("GET /listLectures - Returning %d lectures.", len(lectures))
    return ListLecturesResponse(lectures=lectures)


@router.post("/uploadTranscript", response_model=UploadTranscriptResponse)
async def upload_transcript(
    request: Request,
    lecture_title: Optional[str] = Query(default=None, alias="lectureTitle"),
    lecture_store: LectureStore = Depends(get_store),
):
    """
    Accepts a raw-text transcript and registers a new lecture for it.

    The body is read as-is whatever the content type. Processing is only
    simulated: the response points at a dummy transcript location.
    """
    body = await request.body()
    transcript_text = body.decode("utf-8", errors="replace")

    if not lecture_title or not transcript_text:
        logger.warning("POST /uploadTranscript - Failed: Missing lectureTitle or transcript body.")
        return JSONResponse(status_code=400, content={"message": UPLOAD_BAD_REQUEST})

    logger.info("POST /uploadTranscript - Received title: %s", lecture_title)
    lecture = lecture_store.add(lecture_title, transcript_text)

    return UploadTranscriptResponse(
        lecture_id=lecture.lecture_id,
        transcript_uri=transcript_uri(lecture.lecture_id),
        message=UPLOAD_ACCEPTED,
    )
