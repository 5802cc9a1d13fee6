from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Priority


class PushMessage(BaseModel):
    """A single push notification request.

    `to` lists the recipient push tokens; everything else is notification
    payload that is forwarded to the service untouched. Fields not declared
    here are accepted as extras and sent verbatim, so newer API options work
    without a model change.

    Anatomy:
    - to: one or more push tokens (a bare string is wrapped in a list)
    - title / subtitle / body: visible notification text
    - data: JSON object delivered to the app
    - sound, badge, priority, ttl, expiration: delivery hints
    - channel_id, category_id, mutable_content: platform specific options

    Recipients are not validated on construction. `PushClient` checks them
    right before sending, and an invalid message aborts the whole batch
    without touching the network.

    Example:
        >>> from pushclient.types import PushMessage
        >>> PushMessage(to="ExponentPushToken[xxxx]", title="Hello", body="World")
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    to: list[str] = Field(default_factory=list)
    data: Optional[Dict[str, Any]] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    body: Optional[str] = None
    sound: Optional[Union[str, Dict[str, Any]]] = None
    ttl: Optional[int] = None
    expiration: Optional[int] = None
    priority: Optional[Priority] = None
    badge: Optional[int] = None
    channel_id: Optional[str] = Field(default=None, alias="channelId")
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    mutable_content: Optional[bool] = Field(default=None, alias="mutableContent")

    @field_validator("to", mode="before")
    @classmethod
    def _wrap_single_recipient(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready wire form of this message."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
