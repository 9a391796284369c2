from fastapi import FastAPI

from .db import Base, SessionLocal, engine
from .logging_config import configure_logging
from .progress import SqlProgressStore
from .settings import settings
from .state import TutorSession
from .routers import learn, notes, progress, render, session, subjects

configure_logging(settings.log_level)

app = FastAPI(title="AI Tutor API")
app.include_router(subjects.router)
app.include_router(learn.router)
app.include_router(notes.router)
app.include_router(render.router)
app.include_router(progress.router)
app.include_router(session.router)


@app.get("/info")
def root():
	return {"status": "ok", "gemini_configured": bool(settings.gemini_api_key)}


@app.on_event("startup")
async def startup_event():
	# Initialize DB schema
	Base.metadata.create_all(bind=engine)
	app.state.tutor_session = TutorSession(SqlProgressStore(SessionLocal))
