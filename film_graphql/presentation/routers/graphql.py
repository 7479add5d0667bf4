from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from film_graphql.applications.graphql.context import GraphQLContext
from film_graphql.applications.interfaces.dtos.graphql_request import GraphQLRequest
from film_graphql.applications.interfaces.dtos.graphql_response import GraphQLResponse
from film_graphql.applications.services.graphql_executor import GraphQLExecutor
from film_graphql.domain.exceptions import ClientInputError
from film_graphql.infrastructure.config.dependencies import get_graphql_context, get_graphql_executor
from film_graphql.presentation.graphiql import graphiql_source

router = APIRouter(tags=["graphql"])

GraphQLContextDep = Annotated[GraphQLContext, Depends(get_graphql_context)]
GraphQLExecutorDep = Annotated[GraphQLExecutor, Depends(get_graphql_executor)]


def _to_http(response: GraphQLResponse) -> JSONResponse:
    return JSONResponse(content=response.to_json(), status_code=response.status)


@router.get("/", response_class=HTMLResponse)
def graphiql():
    return HTMLResponse(graphiql_source("/graphql"))


@router.get("/graphql")
async def get_graphql_handler(request: Request, context: GraphQLContextDep, executor: GraphQLExecutorDep):
    try:
        graphql_request = GraphQLRequest.from_query_params(request.query_params)
    except ClientInputError as e:
        return _to_http(GraphQLResponse.client_error(str(e)))
    return _to_http(await executor.execute(graphql_request, context))


@router.post("/graphql")
async def post_graphql_handler(request: Request, context: GraphQLContextDep, executor: GraphQLExecutorDep):
    try:
        graphql_request = GraphQLRequest.from_body(await request.body())
    except ClientInputError as e:
        return _to_http(GraphQLResponse.client_error(str(e)))
    return _to_http(await executor.execute(graphql_request, context))
