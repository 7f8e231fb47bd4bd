"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports), domain events and the document
authorization model. No framework or infrastructure dependencies.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- protocols/: Repository and service interfaces
- events/: Things that happened in the domain
- authorization_model.py: owner / viewer / can_view policy
"""
