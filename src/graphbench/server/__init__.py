"""graphbench.server - Flask REST API for the graph editor.

Provides a thin REST wrapper that holds the editor's graph and exposes
the analyzers and the persisted format over HTTP.
"""

from graphbench.server.app import create_app

__all__ = ["create_app"]
