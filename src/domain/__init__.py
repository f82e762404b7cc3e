"""Data records for parsed slide scripts."""

from .slide import Graph, Slide

__all__ = ['Graph', 'Slide']
