"""Title -> slug mapping over a topic corpus."""

from .title_mapping import TitleMapping, create_mapping, titelize

__all__ = ["TitleMapping", "create_mapping", "titelize"]
