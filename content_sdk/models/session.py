"""Session shapes owned by the identity service.

The content SDK does not create sessions.  It only needs the token that names
the caller's session (sent when a client has context attached) and the XSRF
token that guards every mutating request.
"""

from __future__ import annotations

from pydantic import BaseModel

from content_sdk.models.entities import WIRE_CONFIG


class SessionToken(BaseModel):
    """Token identifying a session, serialized as JSON into a request header."""

    model_config = WIRE_CONFIG

    session_id: str
    user_token: str | None = None

    def to_header_value(self) -> str:
        return self.model_dump_json(by_alias=True)


class Session(BaseModel):
    """The parts of an identity session the content service needs.

    Any other identity fields in the payload are ignored.
    """

    model_config = WIRE_CONFIG

    xsrf_token: str
