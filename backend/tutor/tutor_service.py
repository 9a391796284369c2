"""Prompt construction and schema-constrained parsing for the tutoring features.

Every public coroutine wraps failures (transport, malformed JSON, schema
mismatch) into a single ``GenerationError`` carrying a user-facing message.
"""
from __future__ import annotations
import json
import logging
import re
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from .errors import GenerationError
from .gemini_client import GeminiClient
from .schemas import LessonContent, Question
from .settings import settings

logger = logging.getLogger(__name__)


LEARNING_PATH_SCHEMA: Dict[str, Any] = {
	"type": "ARRAY",
	"description": "An ordered list of 10 beginner to intermediate topics for a subject.",
	"items": {"type": "STRING", "description": "The name of a single learning topic."},
}

QUIZ_SCHEMA: Dict[str, Any] = {
	"type": "OBJECT",
	"properties": {
		"questions": {
			"type": "ARRAY",
			"description": "A list of 3-5 quiz questions.",
			"items": {
				"type": "OBJECT",
				"properties": {
					"question": {"type": "STRING", "description": "The quiz question text."},
					"options": {
						"type": "ARRAY",
						"description": "An array of 4 possible answers.",
						"items": {"type": "STRING"},
					},
					"correctAnswer": {"type": "STRING", "description": "The correct answer from the options."},
				},
				"required": ["question", "options", "correctAnswer"],
			},
		}
	},
	"required": ["questions"],
}

LESSON_SCHEMA: Dict[str, Any] = {
	"type": "OBJECT",
	"properties": {
		"content": {
			"type": "STRING",
			"description": "The lesson content in markdown format (300-500 words).",
		},
		"resources": {
			"type": "OBJECT",
			"properties": {
				"books": {
					"type": "ARRAY",
					"description": "An array of 2-3 relevant book recommendations.",
					"items": {
						"type": "OBJECT",
						"properties": {"title": {"type": "STRING"}, "author": {"type": "STRING"}},
						"required": ["title", "author"],
					},
				},
				"videos": {
					"type": "ARRAY",
					"description": "An array of 2-3 relevant YouTube videos from channels that are still online.",
					"items": {
						"type": "OBJECT",
						"properties": {
							"title": {"type": "STRING"},
							"url": {"type": "STRING", "description": "A full YouTube URL."},
						},
						"required": ["title", "url"],
					},
				},
			},
			"required": ["books", "videos"],
		},
	},
	"required": ["content", "resources"],
}

_TOPICS = TypeAdapter(List[str])
_QUESTIONS = TypeAdapter(List[Question])


def extract_json(text: str) -> Any:
	"""Parse model output as JSON, tolerating a ```json fence or surrounding prose."""
	try:
		return json.loads(text)
	except Exception:
		pass
	code_block = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
	if code_block:
		try:
			return json.loads(code_block.group(1))
		except Exception:
			pass
	for open_ch, close_ch in (("{", "}"), ("[", "]")):
		first = text.find(open_ch)
		last = text.rfind(close_ch)
		if first != -1 and last > first:
			try:
				return json.loads(text[first : last + 1])
			except Exception:
				pass
	raise ValueError("LLM did not return valid JSON.")


def _build_learning_path_prompt(subject_name: str) -> str:
	return f"Generate a comprehensive, ordered list of 10 beginner to intermediate topics for learning {subject_name}."


def _build_custom_path_prompt(goal: str) -> str:
	return (
		f'Based on the learning goal: "{goal}", generate a comprehensive, ordered list of 10 beginner to intermediate topics. '
		"The topics should form a logical learning path to achieve this goal."
	)


def _build_lesson_prompt(subject_name: str, topic_name: str) -> str:
	return (
		f'You are an expert tutor. Create a lesson on "{topic_name}" within the subject of {subject_name}. The lesson should include:\n'
		"1.  A clear, step-by-step explanation of the concept for a beginner (300-500 words) in markdown.\n"
		"2.  A list of 2-3 book recommendations for further reading.\n"
		"3.  A list of 2-3 relevant YouTube video links to supplement the learning."
	)


def _build_explanation_prompt(topic_name: str) -> str:
	return (
		f'You are an expert tutor. Create a lesson on "{topic_name}". The topic might be broad, so provide a foundational overview suitable for a beginner. The lesson should include:\n'
		"1.  A clear, step-by-step explanation of the concept (300-500 words) in markdown.\n"
		"2.  A list of 2-3 book recommendations for further reading.\n"
		"3.  A list of 2-3 relevant YouTube video links to supplement the learning."
	)


def _build_quiz_prompt(subject_name: str, topic_name: str) -> str:
	return (
		f'Create a 3-question multiple-choice quiz on the topic of "{topic_name}" for a {subject_name} student. '
		"For each question, provide 4 options, and indicate the correct answer. "
		"The difficulty should be suitable for a beginner who has just learned the topic."
	)


def _build_reexplain_prompt(content: str) -> str:
	return (
		"Re-explain the following concept in a simpler way, using an analogy if possible. "
		f"Use markdown formatting. Concept:\n\n---\n\n{content}"
	)


def _build_notes_prompt(document_text: str) -> str:
	return (
		"Please summarize the following document and convert it into concise, easy-to-read notes. "
		"Use markdown for formatting, including headers and bullet points to structure the information clearly. "
		"Focus on the key concepts, definitions, and main points.\n\n---\n\n"
		f"DOCUMENT CONTENT:\n\n{document_text}"
	)


class TutorService:
	def __init__(self, client: GeminiClient) -> None:
		self.client = client

	async def _generate_json(self, prompt: str, schema: Dict[str, Any], failure: str) -> Any:
		try:
			raw = await self.client.generate(prompt, response_schema=schema)
			return extract_json(raw)
		except Exception as err:
			logger.exception(failure)
			raise GenerationError(failure) from err

	async def _generate_text(self, prompt: str, failure: str) -> str:
		try:
			return await self.client.generate(prompt)
		except Exception as err:
			logger.exception(failure)
			raise GenerationError(failure) from err

	async def _topics(self, prompt: str, failure: str) -> List[str]:
		data = await self._generate_json(prompt, LEARNING_PATH_SCHEMA, failure)
		try:
			topics = _TOPICS.validate_python(data)
		except ValidationError as err:
			logger.warning("%s: %s", failure, err)
			raise GenerationError(failure) from err
		return [t.strip() for t in topics if t.strip()]

	async def generate_learning_path(self, subject_name: str) -> List[str]:
		return await self._topics(_build_learning_path_prompt(subject_name), "Failed to generate learning path.")

	async def generate_custom_learning_path(self, goal: str) -> List[str]:
		return await self._topics(_build_custom_path_prompt(goal), "Failed to generate custom learning path.")

	async def _lesson(self, prompt: str, failure: str) -> LessonContent:
		data = await self._generate_json(prompt, LESSON_SCHEMA, failure)
		try:
			return LessonContent.model_validate(data)
		except ValidationError as err:
			logger.warning("%s: %s", failure, err)
			raise GenerationError(failure) from err

	async def generate_lesson_content(self, subject_name: str, topic_name: str) -> LessonContent:
		return await self._lesson(_build_lesson_prompt(subject_name, topic_name), "Failed to generate lesson content.")

	async def generate_explanation(self, topic_name: str) -> LessonContent:
		return await self._lesson(_build_explanation_prompt(topic_name), "Failed to generate explanation.")

	async def generate_quiz(self, subject_name: str, topic_name: str) -> List[Question]:
		failure = "Failed to generate quiz."
		data = await self._generate_json(_build_quiz_prompt(subject_name, topic_name), QUIZ_SCHEMA, failure)
		try:
			return _QUESTIONS.validate_python(data["questions"])
		except (KeyError, TypeError, ValidationError) as err:
			logger.warning("%s: %s", failure, err)
			raise GenerationError(failure) from err

	async def reexplain_concept(self, content: str) -> str:
		return await self._generate_text(_build_reexplain_prompt(content), "Failed to re-explain concept.")

	async def generate_notes_from_document(self, document_text: str) -> str:
		# Optional safety clamp to avoid extremely long prompts
		if len(document_text) > settings.max_document_chars:
			document_text = document_text[: settings.max_document_chars]
		return await self._generate_text(_build_notes_prompt(document_text), "Failed to generate notes from document.")
