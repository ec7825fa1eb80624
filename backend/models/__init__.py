from models.lecture import Lecture, ListLecturesResponse, UploadTranscriptResponse, AnswerResponse

__all__ = ["Lecture", "ListLecturesResponse", "UploadTranscriptResponse", "AnswerResponse"]
