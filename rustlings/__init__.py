"""Terminal message helpers, rust-project.json generation and worked exercise solutions."""

__version__ = "5.4.1"