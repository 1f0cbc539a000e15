"""Base schema configuration for all Pydantic models.

Usage:
    - APIRequest: Incoming request bodies and per-call inputs
    - APIResponse: Results returned to callers (and cached)
    - DownstreamResponse: Payloads received from recipe APIs and AI providers
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for inputs; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Base class for results; only declared fields are allowed."""

    model_config = ConfigDict(extra="forbid")


class DownstreamResponse(_BaseSchema):
    """Base class for upstream payloads.

    Extra fields are ignored so upstream additions never break parsing.
    """

    model_config = ConfigDict(extra="ignore")
