"""wikiconv - convert Obsidian [[wikilinks]] into Markdown links."""

__version__ = "0.1.0"
