"""Navigation state for one learner, driven by a pure reducer.

``reduce`` never mutates its input and performs no I/O; ``TutorSession`` owns
the current state and the injected progress store, and is the only place
where persistence happens.
"""
from __future__ import annotations
import enum
import threading
from dataclasses import dataclass, field, replace
from typing import List, Optional, Union

from .progress import ProgressStore, record_quiz
from .schemas import Progress, Subject, Topic
from .subjects import custom_subject


class View(str, enum.Enum):
	SUBJECT_SELECTION = "subject_selection"
	DASHBOARD = "dashboard"
	LESSON = "lesson"
	DOC_TO_NOTES = "doc_to_notes"
	ASK_ANYTHING = "ask_anything"


@dataclass(frozen=True)
class AppState:
	view: View = View.SUBJECT_SELECTION
	subject: Optional[Subject] = None
	topic: Optional[Topic] = None
	custom_query: str = ""
	custom_topics: Optional[List[Topic]] = None
	progress: Progress = field(default_factory=dict)


@dataclass(frozen=True)
class SubjectSelected:
	subject: Subject


@dataclass(frozen=True)
class TopicSelected:
	topic: Topic


@dataclass(frozen=True)
class QuizCompleted:
	subject_id: str
	topic_id: str
	score: int


@dataclass(frozen=True)
class AskAnything:
	query: str


@dataclass(frozen=True)
class CustomPathGenerated:
	goal: str
	topic_names: List[str]


@dataclass(frozen=True)
class BackToDashboard:
	pass


@dataclass(frozen=True)
class BackToSubjects:
	pass


@dataclass(frozen=True)
class OpenDocToNotes:
	pass


Action = Union[
	SubjectSelected,
	TopicSelected,
	QuizCompleted,
	AskAnything,
	CustomPathGenerated,
	BackToDashboard,
	BackToSubjects,
	OpenDocToNotes,
]


def topics_from_names(names: List[str]) -> List[Topic]:
	return [Topic(id=f"topic-{index}", name=name) for index, name in enumerate(names)]


def reduce(state: AppState, action: Action) -> AppState:
	if isinstance(action, SubjectSelected):
		return replace(state, subject=action.subject, view=View.DASHBOARD)
	if isinstance(action, TopicSelected):
		return replace(state, topic=action.topic, view=View.LESSON)
	if isinstance(action, QuizCompleted):
		progress = record_quiz(state.progress, action.subject_id, action.topic_id, action.score)
		return replace(state, progress=progress)
	if isinstance(action, AskAnything):
		return replace(state, custom_query=action.query, view=View.ASK_ANYTHING)
	if isinstance(action, CustomPathGenerated):
		return replace(
			state,
			subject=custom_subject(action.goal),
			custom_topics=topics_from_names(action.topic_names),
			view=View.DASHBOARD,
		)
	if isinstance(action, BackToDashboard):
		return replace(state, view=View.DASHBOARD, topic=None)
	if isinstance(action, BackToSubjects):
		return replace(
			state,
			view=View.SUBJECT_SELECTION,
			subject=None,
			topic=None,
			custom_query="",
			custom_topics=None,
		)
	if isinstance(action, OpenDocToNotes):
		return replace(state, view=View.DOC_TO_NOTES, subject=None, topic=None)
	raise TypeError(f"Unknown action: {action!r}")


def current_view(state: AppState) -> View:
	"""The view to display, falling back to subject selection when a selection is missing."""
	if state.view == View.DASHBOARD and state.subject is None:
		return View.SUBJECT_SELECTION
	if state.view == View.LESSON and (state.subject is None or state.topic is None):
		return View.SUBJECT_SELECTION
	return state.view


class TutorSession:
	def __init__(self, store: ProgressStore) -> None:
		self.store = store
		self.state = AppState(progress=store.load())
		# route handlers run in a threadpool and share this session
		self._lock = threading.Lock()

	def dispatch(self, action: Action) -> AppState:
		with self._lock:
			state = reduce(self.state, action)
			self.state = state
			if isinstance(action, QuizCompleted):
				self.store.save(state.progress)
		return state
