from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Dict


@dataclass(frozen=True)
class GraphQLResponse:
    status: HTTPStatus
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def client_error(cls, message: str) -> "GraphQLResponse":
        return cls(status=HTTPStatus.BAD_REQUEST, payload={"errors": [{"message": message}]})

    def to_json(self) -> Dict[str, Any]:
        return {**self.payload, "status": int(self.status)}
