"""Shared base model and small value objects."""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_ID_SUFFIX = re.compile(r"Id(?=s?$|[A-Z])")


def wire_name(field_name: str) -> str:
    """
    Map a snake_case field to the API's JSON key.

    The API spells identifiers with an upper-case suffix, so
    ``transfer_id`` becomes ``transferID`` and ``account_ids`` becomes
    ``accountIDs``.
    """
    return _ID_SUFFIX.sub("ID", to_camel(field_name))


class MoovModel(BaseModel):
    """Base for every request and response body."""

    model_config = ConfigDict(alias_generator=wire_name, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict using API key names, unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Amount(MoovModel):
    currency: Optional[str] = None
    value: Optional[int] = None  # Minor units (cents)
