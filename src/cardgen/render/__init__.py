"""Render layer: style tokens, icons, actions, element fragments, documents.

Modules here are pure (no filesystem, no network).  Import the submodules
directly; this package does not re-export them.
"""
