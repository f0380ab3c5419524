"""Pydantic model for the Problem document schema."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Problem(BaseModel):
    """Model of the RFC 9457 Problem document schema.

    Extension members are allowed as additional top-level members.
    """

    model_config = ConfigDict(extra='allow')

    type: str = 'about:blank'
    status: Optional[int] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    instance: Optional[str] = None
