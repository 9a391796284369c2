"""Lightweight Markdown-to-HTML rendering for model-generated lesson text.

Only a small block grammar is understood: fenced code, ``#``/``##``/``###``
headings, ``-``/``*`` and numbered lists, and paragraphs. Inside non-code
blocks three inline spans are resolved: bold, italic and inline code.

Each block becomes exactly one top-level element; unknown constructs fall back
to a paragraph, so ``render`` never raises.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import List, Pattern, Tuple, Union


# "\ufeff" counts as whitespace when splitting and trimming, as a byte-order mark
_BLOCK_SEPARATOR = re.compile(r"\n[\s\ufeff]*\n")
_TRIM = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")
_FENCE = "```"
_UNORDERED_MARKER = re.compile(r"^[-*] ")
_ORDERED_MARKER = re.compile(r"^\d+\. ", re.ASCII)
# Longest marker first so "## " is never read as a level-1 heading.
_HEADING_MARKERS: Tuple[Tuple[str, int], ...] = (("### ", 3), ("## ", 2), ("# ", 1))

# Applied in order, each over the previous rule's output. Bold must run
# before italic: once "**x**" is replaced, its asterisks cannot pair up as
# two italic spans. Spans never cross a line break.
INLINE_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
	(re.compile(r"\*\*([^\n\r\u2028\u2029]*?)\*\*"), r"<strong>\1</strong>"),
	(re.compile(r"\*([^\n\r\u2028\u2029]*?)\*"), r"<em>\1</em>"),
	(re.compile(r"`([^`]+)`"), r"<code>\1</code>"),
)


@dataclass(frozen=True)
class CodeBlock:
	language: str
	code: str


@dataclass(frozen=True)
class Heading:
	level: int
	text: str


@dataclass(frozen=True)
class UnorderedList:
	items: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class OrderedList:
	items: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Paragraph:
	text: str


Block = Union[CodeBlock, Heading, UnorderedList, OrderedList, Paragraph]


def escape_html(text: str) -> str:
	# "&" first, otherwise the entities produced for "<" and ">" get re-escaped
	return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def render_inline(text: str) -> str:
	for pattern, replacement in INLINE_RULES:
		text = pattern.sub(replacement, text)
	return text


def split_blocks(text: str) -> List[str]:
	"""Split a document on blank lines, returning trimmed non-empty blocks."""
	blocks: List[str] = []
	for segment in _BLOCK_SEPARATOR.split(text):
		trimmed = _TRIM.sub("", segment)
		if trimmed:
			blocks.append(trimmed)
	return blocks


def _list_items(block: str, marker: Pattern[str]) -> List[str]:
	# Lines without a marker are kept as items with their raw content.
	return [marker.sub("", line, count=1) for line in block.split("\n")]


def classify(block: str) -> Block:
	"""Decide the kind of an already trimmed block.

	Precedence: fenced code, heading, unordered list, ordered list, paragraph.
	"""
	if block.startswith(_FENCE) and block.endswith(_FENCE):
		lines = block.split("\n")
		language = lines[0][len(_FENCE):].strip()
		return CodeBlock(language=language, code="\n".join(lines[1:-1]))
	for marker, level in _HEADING_MARKERS:
		if block.startswith(marker):
			return Heading(level=level, text=block[len(marker):])
	if _UNORDERED_MARKER.match(block):
		return UnorderedList(items=_list_items(block, _UNORDERED_MARKER))
	if _ORDERED_MARKER.match(block):
		return OrderedList(items=_list_items(block, _ORDERED_MARKER))
	return Paragraph(text=block)


def render_block(block: Block) -> str:
	if isinstance(block, CodeBlock):
		return f'<pre><code class="language-{block.language}">{escape_html(block.code)}</code></pre>'
	if isinstance(block, Heading):
		return f"<h{block.level}>{render_inline(block.text)}</h{block.level}>"
	if isinstance(block, UnorderedList):
		items = "".join(f"<li>{render_inline(item)}</li>" for item in block.items)
		return f"<ul>{items}</ul>"
	if isinstance(block, OrderedList):
		items = "".join(f"<li>{render_inline(item)}</li>" for item in block.items)
		return f"<ol>{items}</ol>"
	content = render_inline(block.text).replace("\n", "<br />")
	return f"<p>{content}</p>"


def render(text: str) -> str:
	if not text:
		return ""
	return "".join(render_block(classify(block)) for block in split_blocks(text))
