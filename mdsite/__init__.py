"""mdsite - Markdown to HTML site builder.

Converts a tree of Markdown documents into HTML pages bound into a shared
Jinja2 base template.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
