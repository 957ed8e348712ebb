from agents_md.tui.renderers import BuildConsoleUI

__all__ = ["BuildConsoleUI"]
