from __future__ import annotations


class GenerationError(RuntimeError):
	"""A call to the text-generation service failed; safe to show and retry."""


class ExtractionError(ValueError):
	"""An uploaded document could not be turned into text."""


class UnsupportedFileType(ExtractionError):
	pass
