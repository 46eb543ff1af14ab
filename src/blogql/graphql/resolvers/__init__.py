"""Resolver functions for the GraphQL schema.

Each resolver pulls the DataStore from the request context, delegates to
``blogql.repository`` and converts stored records into GraphQL types.
"""
