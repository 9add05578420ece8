"""HTTP server for Knowledge Inbox."""

from knowledge_inbox.server.app import create_app

__all__ = ["create_app"]
