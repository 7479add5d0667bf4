"""Root GraphQL types and the table binding their fields to resolvers.

Every root field is declared through :func:`resolver_for`, and
:func:`build_schema` refuses to compile a schema whose root fields and
dispatch table disagree.
"""

from typing import Callable, Dict, Iterable, Mapping, Tuple

import strawberry
from strawberry.extensions import AddValidationRules

from film_graphql.applications.graphql import resolvers
from film_graphql.applications.graphql.validation import FilmIdLiteralRule
from film_graphql.domain.exceptions import SchemaConfigurationError

FieldKey = Tuple[str, str]

RESOLVERS: Dict[FieldKey, Callable] = {
    ("Query", "getFilms"): resolvers.get_films,
    ("Query", "getFilm"): resolvers.get_film,
    ("Mutation", "createFilm"): resolvers.create_film,
}


def resolver_for(type_name: str, field_name: str):
    return strawberry.field(name=field_name, resolver=RESOLVERS[(type_name, field_name)])


@strawberry.type
class Query:
    get_films = resolver_for("Query", "getFilms")
    get_film = resolver_for("Query", "getFilm")


@strawberry.type
class Mutation:
    create_film = resolver_for("Mutation", "createFilm")


def check_dispatch_table(root_types: Iterable[type], dispatch_table: Mapping[FieldKey, Callable]) -> None:
    declared: Dict[FieldKey, Callable] = {}
    for root_type in root_types:
        definition = root_type.__strawberry_definition__
        for field in definition.fields:
            key = (definition.name, field.graphql_name or field.python_name)
            declared[key] = field.base_resolver.wrapped_func if field.base_resolver else None

    unbound = sorted(
        f"{type_name}.{field_name}"
        for (type_name, field_name), func in declared.items()
        if func is None or dispatch_table.get((type_name, field_name)) is not func
    )
    undeclared = sorted(f"{type_name}.{field_name}" for type_name, field_name in dispatch_table.keys() - declared.keys())

    problems = []
    if unbound:
        problems.append(f"fields without a registered resolver: {', '.join(unbound)}")
    if undeclared:
        problems.append(f"resolvers for undeclared fields: {', '.join(undeclared)}")
    if problems:
        raise SchemaConfigurationError("GraphQL dispatch table mismatch; " + "; ".join(problems))


def build_schema(dispatch_table: Mapping[FieldKey, Callable] = RESOLVERS) -> strawberry.Schema:
    check_dispatch_table((Query, Mutation), dispatch_table)
    return strawberry.Schema(query=Query, mutation=Mutation, extensions=[AddValidationRules([FilmIdLiteralRule])])
