"""Text-editing core: buffers, cursor movement, undo history, clipboard and configuration."""

__version__ = "0.1.0"