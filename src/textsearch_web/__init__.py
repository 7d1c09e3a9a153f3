"""Flask front end for the text searcher."""
from .web import app, main

__all__ = ["app", "main"]
