from __future__ import annotations
import asyncio
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..deps import get_tutor_service
from ..errors import GenerationError
from ..markdown import render
from ..schemas import Question, Resources, Subject, Topic
from ..state import topics_from_names
from ..subjects import custom_subject, get_subject
from ..tutor_service import TutorService


router = APIRouter(prefix="/learn", tags=["learn"])


class PathRequest(BaseModel):
    subject_id: str


class CustomPathRequest(BaseModel):
    goal: str


class PathResponse(BaseModel):
    subject: Subject
    topics: List[Topic]


class LessonRequest(BaseModel):
    subject_name: str
    topic_name: str


class ExplainRequest(BaseModel):
    topic: str


class ReexplainRequest(BaseModel):
    content: str


class LessonResponse(BaseModel):
    content: str
    html: str
    resources: Resources
    quiz: List[Question] = []


class ReexplainResponse(BaseModel):
    content: str
    html: str


def _required(value: str, name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise HTTPException(status_code=400, detail=f"{name} is required")
    return value


@router.post("/path", response_model=PathResponse)
async def learning_path(req: PathRequest, service: TutorService = Depends(get_tutor_service)):
    subject = get_subject(req.subject_id)
    if subject is None:
        raise HTTPException(status_code=404, detail="Subject not found")
    try:
        names = await service.generate_learning_path(subject.name)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return PathResponse(subject=subject, topics=topics_from_names(names))


@router.post("/path/custom", response_model=PathResponse)
async def custom_learning_path(req: CustomPathRequest, service: TutorService = Depends(get_tutor_service)):
    goal = _required(req.goal, "goal")
    try:
        names = await service.generate_custom_learning_path(goal)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return PathResponse(subject=custom_subject(goal), topics=topics_from_names(names))


@router.post("/lesson", response_model=LessonResponse)
async def lesson(req: LessonRequest, service: TutorService = Depends(get_tutor_service)):
    subject_name = _required(req.subject_name, "subject_name")
    topic_name = _required(req.topic_name, "topic_name")
    try:
        content, quiz = await asyncio.gather(
            service.generate_lesson_content(subject_name, topic_name),
            service.generate_quiz(subject_name, topic_name),
        )
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return LessonResponse(
        content=content.content,
        html=render(content.content),
        resources=content.resources,
        quiz=quiz,
    )


@router.post("/explain", response_model=LessonResponse)
async def explain(req: ExplainRequest, service: TutorService = Depends(get_tutor_service)):
    topic = _required(req.topic, "topic")
    try:
        content = await service.generate_explanation(topic)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return LessonResponse(content=content.content, html=render(content.content), resources=content.resources)


@router.post("/reexplain", response_model=ReexplainResponse)
async def reexplain(req: ReexplainRequest, service: TutorService = Depends(get_tutor_service)):
    content = _required(req.content, "content")
    try:
        text = await service.reexplain_concept(content)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ReexplainResponse(content=text, html=render(text))
