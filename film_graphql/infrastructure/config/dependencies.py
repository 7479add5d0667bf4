from film_graphql.applications.graphql.context import GraphQLContext
from film_graphql.applications.graphql.schema import build_schema
from film_graphql.applications.services.graphql_executor import GraphQLExecutor
from film_graphql.infrastructure.config.settings import Settings, load_settings
from film_graphql.infrastructure.persistence.database import film_repository_scope

# compiled once; a dispatch table mismatch fails the import
graphql_schema = build_schema()


def get_settings() -> Settings:
    return load_settings()


def get_graphql_context() -> GraphQLContext:
    return GraphQLContext(film_repository_provider=film_repository_scope)


def get_graphql_executor() -> GraphQLExecutor:
    return GraphQLExecutor(graphql_schema)
