"""
Beneficiaries API: REST facade over the beneficiary registry database.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - registry: Beneficiaries enrolled in social programs and the
      identity-document types that identify them.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Stored-procedure gateways implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
