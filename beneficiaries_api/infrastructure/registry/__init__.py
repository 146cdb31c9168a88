"""
Infrastructure adapters for the registry bounded context.

Each adapter implements a domain port (ABC) by invoking a stored
procedure through the shared ConnectionProvider.
"""
