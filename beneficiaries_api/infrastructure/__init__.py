"""
Infrastructure package.

Connection management and the adapters that implement domain ports
against the external stored procedures.
"""
