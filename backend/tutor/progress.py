"""Progress tracking behind a small load/save facade.

Persistence is best effort: a failing store is logged and ignored, and the
caller's in-memory progress stays authoritative for the session.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict

from sqlalchemy.orm import Session

from .models import TopicProgressRow
from .schemas import Progress, TopicProgress, TopicStatus

logger = logging.getLogger(__name__)


def copy_progress(progress: Progress) -> Progress:
	return {
		subject_id: {topic_id: tp.model_copy() for topic_id, tp in topics.items()}
		for subject_id, topics in progress.items()
	}


def record_quiz(progress: Progress, subject_id: str, topic_id: str, score: int) -> Progress:
	"""Return a new mapping with the topic marked completed at ``score``."""
	updated = copy_progress(progress)
	updated.setdefault(subject_id, {})[topic_id] = TopicProgress(completed=True, quiz_score=score)
	return updated


def topic_status(progress: Progress, subject_id: str, topic_id: str) -> TopicStatus:
	current = progress.get(subject_id, {}).get(topic_id)
	if current is not None and current.completed:
		return TopicStatus(status="completed", score=current.quiz_score)
	# every topic is unlocked; "locked" is reserved for gated paths
	return TopicStatus(status="unlocked", score=None)


class ProgressStore(ABC):
	@abstractmethod
	def load(self) -> Progress:
		"""Return saved progress, or an empty mapping when nothing can be read."""

	@abstractmethod
	def save(self, progress: Progress) -> None:
		"""Persist ``progress``; failures must not propagate."""


class MemoryProgressStore(ProgressStore):
	def __init__(self, initial: Progress | None = None) -> None:
		self._progress: Progress = copy_progress(initial or {})

	def load(self) -> Progress:
		return copy_progress(self._progress)

	def save(self, progress: Progress) -> None:
		self._progress = copy_progress(progress)


class SqlProgressStore(ProgressStore):
	def __init__(self, session_factory: Callable[[], Session]) -> None:
		self._session_factory = session_factory

	def load(self) -> Progress:
		progress: Progress = {}
		try:
			with self._session_factory() as db:
				for row in db.query(TopicProgressRow).all():
					progress.setdefault(row.subject_id, {})[row.topic_id] = TopicProgress(
						completed=bool(row.completed),
						quiz_score=row.quiz_score,
					)
		except Exception:
			logger.exception("Failed to load progress")
			return {}
		return progress

	def save(self, progress: Progress) -> None:
		try:
			with self._session_factory() as db:
				for subject_id, topics in progress.items():
					for topic_id, tp in topics.items():
						db.merge(
							TopicProgressRow(
								subject_id=subject_id,
								topic_id=topic_id,
								completed=tp.completed,
								quiz_score=tp.quiz_score,
							)
						)
				db.commit()
		except Exception:
			logger.exception("Failed to save progress")


def progress_to_json(progress: Progress) -> Dict[str, Dict[str, dict]]:
	return {
		subject_id: {topic_id: tp.model_dump(by_alias=True) for topic_id, tp in topics.items()}
		for subject_id, topics in progress.items()
	}
