from dotenv import load_dotenv
load_dotenv()

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routes import lectures, qa
from store import LectureStore

logger = logging.getLogger(__name__)

ENDPOINTS = (
    ("GET", "/listLectures"),
    ("POST", "/uploadTranscript?lectureTitle=YourTitle"),
    ("POST", "/qa?q=YourQuestion"),
)


def create_app(lecture_store: Optional[LectureStore] = None) -> FastAPI:
    """Builds the API around the given store (a freshly seeded one by default)."""
    app = FastAPI(title="Lecture Assistant Mock API", version="0.1.0")
    app.state.lecture_store = lecture_store if lecture_store is not None else LectureStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(lectures.router)
    app.include_router(qa.router)

    @app.get("/")
    def health():
        return {"status": "ok", "service": "lecture-assistant-mock"}

    return app


app = create_app()


def run():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    base_url = f"http://localhost:{config.PORT}"
    logger.info("Dummy API server is running on %s", base_url)
    logger.info("Available endpoints:")
    for method, path in ENDPOINTS:
        logger.info("  %-4s %s%s", method, base_url, path)

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
