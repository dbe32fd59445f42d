from .cli import DSShell, build_parser, main

__all__ = ["DSShell", "build_parser", "main"]
