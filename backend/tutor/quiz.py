from __future__ import annotations
from typing import Optional, Sequence

from .schemas import Question


def score_quiz(questions: Sequence[Question], answers: Sequence[Optional[str]]) -> int:
	"""Percentage of correct answers, rounded half up. Missing answers are wrong."""
	if not questions:
		return 0
	correct = 0
	for index, question in enumerate(questions):
		if index < len(answers) and answers[index] == question.correct_answer:
			correct += 1
	return int(correct * 100 / len(questions) + 0.5)
