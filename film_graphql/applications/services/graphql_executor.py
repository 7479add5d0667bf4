from http import HTTPStatus
from typing import Optional, Sequence

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionResult

from film_graphql.applications.graphql.context import GraphQLContext
from film_graphql.applications.graphql.validation import invalid_id_variables
from film_graphql.applications.interfaces.dtos.graphql_request import GraphQLRequest
from film_graphql.applications.interfaces.dtos.graphql_response import GraphQLResponse
from film_graphql.domain.exceptions import StorageError
from film_graphql.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


def has_top_level_error(errors: Optional[Sequence[GraphQLError]]) -> bool:
    """True when the operation failed as a whole rather than at a field.

    Parse, validation and variable coercion errors carry no path; errors
    raised while resolving a field always do.
    """
    return any(error.path is None for error in errors or ())


def encode_result(result: ExecutionResult) -> GraphQLResponse:
    errors = [error.formatted for error in result.errors or ()]

    if has_top_level_error(result.errors):
        return GraphQLResponse(status=HTTPStatus.BAD_REQUEST, payload={"errors": errors})

    payload = {"data": result.data}
    if errors:
        payload["errors"] = errors
    return GraphQLResponse(status=HTTPStatus.OK, payload=payload)


class GraphQLExecutor:
    def __init__(self, schema: strawberry.Schema):
        self.schema = schema

    async def execute(self, request: GraphQLRequest, context: GraphQLContext) -> GraphQLResponse:
        logger.debug(f"Executing GraphQL operation {request.operation_name or '<anonymous>'}")
        problems = invalid_id_variables(request.query, request.variables, request.operation_name)
        if problems:
            return GraphQLResponse.client_error(problems[0])
        try:
            result = await self.schema.execute(
                request.query,
                variable_values=request.variables,
                context_value=context,
                operation_name=request.operation_name,
            )
        except StorageError as e:
            logger.exception("Storage failure outside field resolution")
            return GraphQLResponse.client_error(str(e))
        return encode_result(result)
