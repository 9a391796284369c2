from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel

from ..deps import get_tutor_service
from ..errors import ExtractionError, GenerationError, UnsupportedFileType
from ..extraction import extract_text
from ..markdown import render
from ..tutor_service import TutorService


router = APIRouter(prefix="/notes", tags=["notes"])


class NotesResponse(BaseModel):
    filename: str
    notes: str
    html: str


@router.post("", response_model=NotesResponse)
async def document_to_notes(
    file: UploadFile = File(...),
    service: TutorService = Depends(get_tutor_service),
):
    filename = file.filename or ""
    content = await file.read()
    try:
        text = extract_text(filename, content, file.content_type)
    except UnsupportedFileType as e:
        raise HTTPException(status_code=415, detail=str(e))
    except ExtractionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not text.strip():
        raise HTTPException(status_code=400, detail="The document does not contain any text.")
    try:
        notes = await service.generate_notes_from_document(text)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return NotesResponse(filename=filename, notes=notes, html=render(notes))
