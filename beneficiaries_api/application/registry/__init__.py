"""
Application layer for the registry bounded context.
"""
