"""Request bodies for the HTTP API.

Fields accept any JSON value; knowledge_inbox.validation checks them so
bad input gets the API's own error messages.
"""

from typing import Any

from pydantic import BaseModel


class IngestRequest(BaseModel):
    type: Any = None
    content: Any = None
    url: Any = None
    metadata: Any = None


class QueryRequest(BaseModel):
    question: Any = None
    topK: Any = None
