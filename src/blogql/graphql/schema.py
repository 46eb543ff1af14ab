"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from ..store.memory import DataStore
from .mutations.root import Mutation
from .queries.root import Query
from .types.comment import Comment
from .types.post import Post

logger = get_logger(__name__)

# Both HasAuthor implementations are listed so the interface always has them
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    types=[Post, Comment],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    errors = gql_validate_schema(schema._schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(
    store: DataStore | None = None, graphiql: bool | None = None
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Args:
        store: Store to serve. Defaults to ``request.app.state.store``.
        graphiql: Enable the GraphiQL IDE. Defaults to ``settings.graphiql``.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": store if store is not None else request.app.state.store,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if (settings.graphiql if graphiql is None else graphiql) else None,
        context_getter=get_context,
    )
