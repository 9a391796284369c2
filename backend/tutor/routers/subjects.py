from __future__ import annotations
from typing import List

from fastapi import APIRouter, HTTPException

from ..schemas import Subject
from ..subjects import SUBJECTS, get_subject


router = APIRouter(prefix="/subjects", tags=["subjects"])


@router.get("", response_model=List[Subject])
def list_subjects():
    return SUBJECTS


@router.get("/{subject_id}", response_model=Subject)
def read_subject(subject_id: str):
    subject = get_subject(subject_id)
    if subject is None:
        raise HTTPException(status_code=404, detail="Subject not found")
    return subject
