"""Shared pydantic base for API payloads.

Learn: The wire format is camelCase (startDate, venueId, ...) while the
Python side stays snake_case. The alias generator maps between them;
populate_by_name lets internal code build models with snake_case names.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
