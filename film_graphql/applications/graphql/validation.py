"""Pre-execution checks for ``ID`` values.

``ID`` is the built-in scalar, so any string or integer would pass the
type system. Film ids must be hyphenated UUIDs, and a malformed one is a
request error rather than a field error: literals are rejected during
validation and variables before execution starts.
"""

from typing import Any, List, Mapping, Optional

from graphql import (
    GraphQLError,
    IntValueNode,
    ListTypeNode,
    NonNullTypeNode,
    OperationDefinitionNode,
    StringValueNode,
    TypeNode,
    ValidationRule,
    ValueNode,
    get_named_type,
    parse,
)

from film_graphql.applications.graphql.types import parse_film_id
from film_graphql.domain.exceptions import ClientInputError

ID_TYPE_NAME = "ID"


def _type_name(type_node: TypeNode) -> str:
    while isinstance(type_node, (NonNullTypeNode, ListTypeNode)):
        type_node = type_node.type
    return type_node.name.value


class FilmIdLiteralRule(ValidationRule):
    """Rejects ``ID`` literals that are not hyphenated UUIDs."""

    def enter_argument(self, node, *_args):
        argument = self.context.get_argument()
        if argument is not None and get_named_type(argument.type).name == ID_TYPE_NAME:
            self._check_literal(node.value)

    def enter_variable_definition(self, node, *_args):
        if node.default_value is not None and _type_name(node.type) == ID_TYPE_NAME:
            self._check_literal(node.default_value)

    def _check_literal(self, value_node: ValueNode) -> None:
        if not isinstance(value_node, (StringValueNode, IntValueNode)):
            return
        try:
            parse_film_id(value_node.value)
        except ClientInputError as e:
            self.report_error(GraphQLError(str(e), value_node))


def invalid_id_variables(
    query: str, variables: Optional[Mapping[str, Any]], operation_name: Optional[str] = None
) -> List[str]:
    """Messages for ``ID`` variables whose values are not hyphenated UUIDs.

    A query that does not parse yields nothing; execution reports it.
    """
    try:
        document = parse(query)
    except GraphQLError:
        return []

    variables = variables or {}
    problems = []
    for definition in document.definitions:
        if not isinstance(definition, OperationDefinitionNode):
            continue
        if operation_name and (definition.name is None or definition.name.value != operation_name):
            continue
        for variable_definition in definition.variable_definitions or ():
            name = variable_definition.variable.name.value
            value = variables.get(name)
            if value is None or _type_name(variable_definition.type) != ID_TYPE_NAME:
                continue
            for item in value if isinstance(value, list) else [value]:
                if item is None:
                    continue
                try:
                    parse_film_id(item)
                except ClientInputError as e:
                    problems.append(f"Variable '${name}' got invalid value {item!r}; {e}")
    return problems
