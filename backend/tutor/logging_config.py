from __future__ import annotations
import logging

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
	logging.basicConfig(level=level.upper(), format=_FORMAT, force=True)
	# httpx request lines carry the AI Studio key as a query parameter
	logging.getLogger("httpx").setLevel(logging.WARNING)
