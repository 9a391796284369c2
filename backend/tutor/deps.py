from __future__ import annotations
from typing import AsyncIterator

from fastapi import HTTPException, Request

from .errors import GenerationError
from .gemini_client import GeminiClient
from .state import TutorSession
from .tutor_service import TutorService


async def get_tutor_service() -> AsyncIterator[TutorService]:
	try:
		client = GeminiClient()
	except GenerationError as e:
		raise HTTPException(status_code=503, detail=str(e))
	try:
		yield TutorService(client)
	finally:
		await client.aclose()


def get_tutor_session(request: Request) -> TutorSession:
	return request.app.state.tutor_session
