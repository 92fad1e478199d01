"""GraphQL query document and request payload for the repository view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .models import RepositoryIdentifier

PAGE_SIZE = 20

REPO_VIEW_QUERY = f"""
query RepoView($owner: String!, $name: String!) {{
  repository(owner: $owner, name: $name) {{
    stargazers {{
      totalCount
    }}
    issues(first: {PAGE_SIZE}, states: OPEN) {{
      nodes {{
        title
        comments {{
          totalCount
        }}
      }}
    }}
    pullRequests(first: {PAGE_SIZE}, states: OPEN) {{
      nodes {{
        title
        commits {{
          totalCount
        }}
        comments {{
          totalCount
        }}
        author {{
          __typename
          ... on User {{
            name
          }}
        }}
      }}
    }}
  }}
}}
""".strip()

OPERATION_NAME = "RepoView"


@dataclass(frozen=True)
class QueryRequest:
    """A GraphQL document together with its bound variables."""

    query: str
    owner: str
    name: str
    operation_name: str = OPERATION_NAME

    @property
    def variables(self) -> Dict[str, str]:
        return {"owner": self.owner, "name": self.name}

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body sent to the GraphQL endpoint."""
        return {
            "query": self.query,
            "variables": self.variables,
            "operationName": self.operation_name,
        }


def build_query(identifier: RepositoryIdentifier) -> QueryRequest:
    """Bind a repository identifier to the fixed repository view query."""
    return QueryRequest(query=REPO_VIEW_QUERY, owner=identifier.owner, name=identifier.name)
