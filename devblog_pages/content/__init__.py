"""Document model and authoring-format parsers for blog articles."""

from .loader import document_from_mapping, load_markdown_document
from .markdown_parser import parse_document
from .models import (
    CodeBlock,
    ContentNode,
    Document,
    Heading,
    NavigationLink,
    Paragraph,
    Span,
    back_to_index,
)

__all__ = [
    "CodeBlock",
    "ContentNode",
    "Document",
    "Heading",
    "NavigationLink",
    "Paragraph",
    "Span",
    "back_to_index",
    "document_from_mapping",
    "load_markdown_document",
    "parse_document",
]
