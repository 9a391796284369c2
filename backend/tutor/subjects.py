from __future__ import annotations
from typing import Dict, List, Optional

from .schemas import Subject


SUBJECTS: List[Subject] = [
	Subject(
		id="calculus",
		name="Calculus",
		description="Master derivatives, integrals, and the fundamental theorems of calculus.",
	),
	Subject(
		id="javascript",
		name="JavaScript",
		description="Learn the language of the web, from variables to asynchronous programming.",
	),
	Subject(
		id="data-structures",
		name="Data Structures & Algorithms",
		description="Understand fundamental data structures and algorithmic complexity.",
	),
	Subject(
		id="machine-learning",
		name="Machine Learning",
		description="Explore core concepts of AI, from regression to neural networks.",
	),
	Subject(
		id="thermodynamics",
		name="Thermodynamics",
		description="Grasp the laws of energy, heat, work, and entropy in physical systems.",
	),
	Subject(
		id="digital-logic",
		name="Digital Logic Design",
		description="Learn the building blocks of digital computers, from logic gates to circuits.",
	),
	Subject(
		id="linear-algebra",
		name="Linear Algebra",
		description="Study vectors, matrices, and linear transformations.",
	),
	Subject(
		id="databases",
		name="Databases",
		description="Learn about relational models, SQL, and database design principles.",
	),
]

_BY_ID: Dict[str, Subject] = {s.id: s for s in SUBJECTS}

CUSTOM_SUBJECT_ID = "custom-path"


def get_subject(subject_id: str) -> Optional[Subject]:
	return _BY_ID.get(subject_id)


def custom_subject(goal: str) -> Subject:
	return Subject(id=CUSTOM_SUBJECT_ID, name="Your Custom Path", description=goal)
