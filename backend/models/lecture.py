from pydantic import BaseModel, ConfigDict


class Lecture(BaseModel):
    model_config = ConfigDict(frozen=True)

    lecture_id: str
    title: str
    notes: str          # link to the generated notes file


class ListLecturesResponse(BaseModel):
    lectures: list[Lecture]


class UploadTranscriptResponse(BaseModel):
    lecture_id: str
    transcript_uri: str
    message: str


class AnswerResponse(BaseModel):
    answer: str
