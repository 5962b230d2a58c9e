"""Wire message sent for a reply.

Shape: {"status": int, "headers": {...}, "body"?: any}
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ReplyMessage(BaseModel):
    """The single outbound message of a reply.

    `body` is only part of the payload when it was explicitly given,
    so an absent body and a `None` body stay distinguishable:

        ReplyMessage(status=204, headers={}).to_payload()
        # {"status": 204, "headers": {}}

        ReplyMessage(status=200, headers={}, body=None).to_payload()
        # {"status": 200, "headers": {}, "body": None}
    """

    status: int
    headers: dict[str, Any] = Field(default_factory=dict)
    body: Any = None

    def to_payload(self) -> dict[str, Any]:
        """Dump to the plain dict handed to the channel."""
        payload: dict[str, Any] = {"status": self.status, "headers": self.headers}
        if "body" in self.model_fields_set:
            payload["body"] = self.body
        return payload
