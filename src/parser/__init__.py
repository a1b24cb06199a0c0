"""Conversion of wikitext syntax trees into the article element model."""

from src.parser.assembler import ArticleAssembler
from src.parser.engine import MarkupEngine
from src.parser.state import ParseState
from src.parser.walker import SyntaxTreeWalker

__all__ = ["ArticleAssembler", "MarkupEngine", "ParseState", "SyntaxTreeWalker"]
