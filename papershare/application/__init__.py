"""Application layer - Use cases and orchestration.

CQRS use cases plus the services that own authorization decisions:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: AccessCoordinator, AuthorizationFilter, AuthorizationMode
- dtos/: Handler result dataclasses

The application layer orchestrates domain logic but contains no
infrastructure code.
"""
