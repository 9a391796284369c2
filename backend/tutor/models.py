from __future__ import annotations
from datetime import datetime
from sqlalchemy import Boolean, Column, String, DateTime, Integer
from .db import Base


class TopicProgressRow(Base):
	__tablename__ = "topic_progress"
	# One row per (subject, topic); custom paths share the "custom-path" subject id
	subject_id = Column(String(128), primary_key=True)
	topic_id = Column(String(128), primary_key=True)
	completed = Column(Boolean, default=False, nullable=False)
	quiz_score = Column(Integer, nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
