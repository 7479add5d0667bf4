import json
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from film_graphql.domain.exceptions import ClientInputError


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'body'}: {detail['msg']}" for detail in error.errors()
    )


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(min_length=1)
    operation_name: Optional[str] = Field(default=None, alias="operationName")
    variables: Optional[Dict[str, Any]] = None

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> "GraphQLRequest":
        data: Dict[str, Any] = dict(params)
        variables = data.pop("variables", None)
        if variables:
            try:
                data["variables"] = json.loads(variables)
            except ValueError as e:
                raise ClientInputError("Invalid GraphQL request: variables must be a JSON object") from e
        return cls._decode(data)

    @classmethod
    def from_body(cls, body: Union[bytes, str]) -> "GraphQLRequest":
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise ClientInputError(f"Invalid GraphQL request: {_describe(e)}") from e

    @classmethod
    def _decode(cls, data: Dict[str, Any]) -> "GraphQLRequest":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ClientInputError(f"Invalid GraphQL request: {_describe(e)}") from e
