import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from faq.rules import answer_question
from models.lecture import AnswerResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["qa"])

QA_BAD_REQUEST = "Bad Request: 'q' query parameter is required."


@router.post("/qa", response_model=AnswerResponse)
async def ask_question(q: Optional[str] = Query(default=None)):
    """Course FAQ chat: answers a handful of known questions."""
    if not q:
        logger.warning("POST /qa - Failed: Missing question.")
        return JSONResponse(status_code=400, content={"error": QA_BAD_REQUEST})

    logger.info('POST /qa - Received question: "%s"', q)
    return AnswerResponse(answer=answer_question(q))
