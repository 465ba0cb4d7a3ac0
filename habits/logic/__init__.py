"""Core application logic layer.

Subpackages:
- commands: command set, session state and the dispatcher applying commands
- view: render-sink payload built from a session
"""
__all__ = ["commands", "view"]
