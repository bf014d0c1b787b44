"""Typed document model (incodoc) nodes.

All nodes are frozen dataclasses with slots:
- Immutability: a tree is built once by the parser and read once by a renderer
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: renderers dispatch with match statements over closed unions

Node Hierarchy:
Doc
├── Nav (recursive: subs)
│   └── Link
├── Paragraph
│   ├── str (plain text)
│   ├── MText
│   ├── Emphasis
│   ├── Link
│   ├── CodeBlock | CodeIdentError
│   ├── List (items: Paragraph, ...)
│   └── Table (rows: Row -> Paragraph, ...)
└── Section (recursive: items)
    └── Heading (items: str | Emphasis)

Plain text is a bare ``str`` wherever an item tuple allows it.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TypeAlias

# =============================================================================
# Enumerations
# =============================================================================


class EmType(Enum):
    """Direction of an emphasis span."""

    EMPHASIS = auto()
    DEEMPHASIS = auto()


class EmStrength(Enum):
    """Strength of an emphasis span."""

    LIGHT = auto()
    MEDIUM = auto()
    STRONG = auto()


class ListType(Enum):
    """Kind of list.

    DISTINCT: numbered items (<ol>)
    IDENTICAL: bulleted items (<ul>)
    CHECKED: task list, items may carry the "checked" tag

    """

    DISTINCT = auto()
    IDENTICAL = auto()
    CHECKED = auto()


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class MText:
    """Text annotated with tags.

    Used for inline code spans (tag "code") and any other tag-driven styling.
    HTML: <span class="tag1 tag2 ">text</span>

    """

    text: str
    tags: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Emphasis:
    """Emphasized or de-emphasized span.

    The (etype, strength) pair selects one of six inline styles.

    """

    etype: EmType
    strength: EmStrength
    text: str


LinkItem: TypeAlias = str | Emphasis
HeadingItem: TypeAlias = str | Emphasis


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink.

    HTML: <a href="url" target="_blank" class="tags ">items</a>

    """

    url: str
    items: tuple[LinkItem, ...]
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Code block with its indentation already normalised.

    ``code`` is kept verbatim, internal newlines included.

    """

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class CodeIdentError:
    """A code block whose indentation could not be determined.

    Carries no payload; renderers emit a fixed inline marker in its place.

    """


Code: TypeAlias = CodeBlock | CodeIdentError


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Paragraph: an ordered run of inline and nested block items.

    ``tags`` matters when the paragraph is a list item: the "checked" tag
    marks a completed task.

    """

    items: tuple[ParagraphItem, ...]
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class List:
    """List; every item is one paragraph."""

    ltype: ListType
    items: tuple[Paragraph, ...]


@dataclass(frozen=True, slots=True)
class Row:
    """Table row; every cell is one paragraph."""

    items: tuple[Paragraph, ...]
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class Table:
    """Table made of rows."""

    rows: tuple[Row, ...]


ParagraphItem: TypeAlias = str | MText | Emphasis | Link | Code | List | Table


@dataclass(frozen=True, slots=True)
class Heading:
    """Section heading.

    ``level`` is 0-based: 0 is the top-level heading (<h1>).

    """

    level: int
    items: tuple[HeadingItem, ...]


@dataclass(frozen=True, slots=True)
class Section:
    """Heading plus nested paragraphs and sub-sections."""

    heading: Heading
    items: tuple[SectionItem, ...]


SectionItem: TypeAlias = Paragraph | Section


@dataclass(frozen=True, slots=True)
class Nav:
    """Navigation tree node.

    Navs nest to arbitrary depth through ``subs``.

    """

    description: str
    links: tuple[Link, ...] = ()
    subs: tuple[Nav, ...] = ()


DocItem: TypeAlias = Nav | Paragraph | Section


@dataclass(frozen=True, slots=True)
class Doc:
    """Root document node."""

    items: tuple[DocItem, ...]


Node: TypeAlias = (
    Doc
    | Nav
    | Section
    | Heading
    | Paragraph
    | MText
    | Emphasis
    | Link
    | CodeBlock
    | CodeIdentError
    | List
    | Table
    | Row
)
