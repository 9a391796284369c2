from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ..deps import get_tutor_session
from ..progress import progress_to_json, topic_status
from ..quiz import score_quiz
from ..schemas import Question, TopicStatus
from ..state import QuizCompleted, TutorSession


router = APIRouter(prefix="/progress", tags=["progress"])


class QuizResultRequest(BaseModel):
    subject_id: str
    topic_id: str
    # Either a precomputed percentage or the quiz plus the learner's answers
    score: Optional[int] = Field(default=None, ge=0, le=100)
    questions: List[Question] = []
    answers: List[Optional[str]] = []


class QuizResultResponse(BaseModel):
    score: int
    status: TopicStatus


@router.get("")
def read_progress(session: TutorSession = Depends(get_tutor_session)):
    return progress_to_json(session.state.progress)


@router.get("/{subject_id}/{topic_id}", response_model=TopicStatus)
def read_topic_status(subject_id: str, topic_id: str, session: TutorSession = Depends(get_tutor_session)):
    return topic_status(session.state.progress, subject_id, topic_id)


@router.post("/quiz", response_model=QuizResultResponse)
def record_quiz_result(req: QuizResultRequest, session: TutorSession = Depends(get_tutor_session)):
    if req.score is None and not req.questions:
        raise HTTPException(status_code=400, detail="score or questions are required")
    score = req.score if req.score is not None else score_quiz(req.questions, req.answers)
    state = session.dispatch(QuizCompleted(subject_id=req.subject_id, topic_id=req.topic_id, score=score))
    return QuizResultResponse(score=score, status=topic_status(state.progress, req.subject_id, req.topic_id))
