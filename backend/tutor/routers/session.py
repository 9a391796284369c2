from __future__ import annotations
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..deps import get_tutor_session
from ..progress import progress_to_json
from ..schemas import Subject, Topic
from ..state import (
    Action,
    AppState,
    AskAnything,
    BackToDashboard,
    BackToSubjects,
    CustomPathGenerated,
    OpenDocToNotes,
    SubjectSelected,
    TopicSelected,
    TutorSession,
    View,
    current_view,
)
from ..subjects import get_subject


router = APIRouter(prefix="/session", tags=["session"])


class ActionRequest(BaseModel):
    type: Literal[
        "subject_selected",
        "topic_selected",
        "ask_anything",
        "custom_path_generated",
        "back_to_dashboard",
        "back_to_subjects",
        "open_doc_to_notes",
    ]
    subject_id: Optional[str] = None
    topic: Optional[Topic] = None
    query: Optional[str] = None
    goal: Optional[str] = None
    topics: List[str] = []


class SessionResponse(BaseModel):
    view: View
    subject: Optional[Subject] = None
    topic: Optional[Topic] = None
    custom_query: str = ""
    custom_topics: Optional[List[Topic]] = None
    progress: dict


def _to_response(state: AppState) -> SessionResponse:
    return SessionResponse(
        view=current_view(state),
        subject=state.subject,
        topic=state.topic,
        custom_query=state.custom_query,
        custom_topics=state.custom_topics,
        progress=progress_to_json(state.progress),
    )


def _to_action(req: ActionRequest) -> Action:
    if req.type == "subject_selected":
        subject = get_subject(req.subject_id or "")
        if subject is None:
            raise HTTPException(status_code=404, detail="Subject not found")
        return SubjectSelected(subject=subject)
    if req.type == "topic_selected":
        if req.topic is None:
            raise HTTPException(status_code=400, detail="topic is required")
        return TopicSelected(topic=req.topic)
    if req.type == "ask_anything":
        query = (req.query or "").strip()
        if not query:
            raise HTTPException(status_code=400, detail="query is required")
        return AskAnything(query=query)
    if req.type == "custom_path_generated":
        goal = (req.goal or "").strip()
        if not goal or not req.topics:
            raise HTTPException(status_code=400, detail="goal and topics are required")
        return CustomPathGenerated(goal=goal, topic_names=list(req.topics))
    if req.type == "back_to_dashboard":
        return BackToDashboard()
    if req.type == "back_to_subjects":
        return BackToSubjects()
    return OpenDocToNotes()


@router.get("", response_model=SessionResponse)
def read_session(session: TutorSession = Depends(get_tutor_session)):
    return _to_response(session.state)


@router.post("/actions", response_model=SessionResponse)
def apply_action(req: ActionRequest, session: TutorSession = Depends(get_tutor_session)):
    return _to_response(session.dispatch(_to_action(req)))
