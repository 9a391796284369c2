from fastapi import APIRouter
from pydantic import BaseModel

from ..markdown import render

router = APIRouter(prefix="/render", tags=["render"])


class RenderRequest(BaseModel):
    text: str = ""


@router.post("")
def render_markdown(req: RenderRequest):
    return {"html": render(req.text)}
