"""
pathmaster: keep the shell PATH free of stale entries.

Removes non-existent directories from PATH and rewrites the shell startup
file so the cleaned PATH survives new sessions.
"""

__all__ = ["cli"]
