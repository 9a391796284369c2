from __future__ import annotations
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
	# The frontend speaks camelCase (correctAnswer, quizScore)
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Subject(BaseModel):
	id: str
	name: str
	description: str


class Topic(BaseModel):
	id: str
	name: str


class BookResource(BaseModel):
	title: str
	author: str


class VideoResource(BaseModel):
	title: str
	url: str


class Resources(BaseModel):
	books: List[BookResource] = Field(default_factory=list)
	videos: List[VideoResource] = Field(default_factory=list)


class LessonContent(BaseModel):
	content: str
	resources: Resources = Field(default_factory=Resources)


class Question(_CamelModel):
	question: str
	options: List[str]
	correct_answer: str


class TopicProgress(_CamelModel):
	completed: bool = False
	quiz_score: Optional[int] = None


class TopicStatus(BaseModel):
	status: Literal["locked", "unlocked", "completed"]
	score: Optional[int] = None


# subject_id -> topic_id -> progress
Progress = Dict[str, Dict[str, TopicProgress]]
