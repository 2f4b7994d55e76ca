"""
Search response models.

Field names follow the service's JSON reply; Python attribute names are
snake_case with the wire names as aliases.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        # null decodes to the field default, e.g. "items": null -> []
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Item(_WireModel):
    fields: Dict[str, str] = Field(default_factory=dict)
    sort_expr_values: List[str] = Field(default_factory=list, alias="sortExprValues")


class Result(_WireModel):
    search_time: float = Field(0.0, alias="searchtime")
    total: int = 0
    num: int = 0
    view_total: int = Field(0, alias="viewtotal")
    items: List[Item] = Field(default_factory=list)


class ResponseError(_WireModel):
    code: int = 0
    message: str = ""


class SearchResponse(_WireModel):
    """Decoded search reply."""

    status: str = ""
    request_id: str = ""
    result: Result = Field(default_factory=Result)
    errors: List[ResponseError] = Field(default_factory=list)

    @classmethod
    def from_json(cls, body) -> "SearchResponse":
        """
        Decode a reply body.

        Raises:
            pydantic.ValidationError: If the body is not JSON or does not
                match the response shape
        """
        return cls.model_validate_json(body)

    def to_json(self) -> str:
        """Serialize back to the wire shape."""
        return self.model_dump_json(by_alias=True)
