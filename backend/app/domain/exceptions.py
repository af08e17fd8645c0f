"""Domain-specific exceptions — framework-independent."""


class EntityStorageError(Exception):
    """Raised by the entity store when a save or delete fails."""

    def __init__(self, operation: str, entity_type: str, entity_id: int | str | None = None):
        self.operation = operation
        self.entity_type = entity_type
        self.entity_id = entity_id
        target = entity_type if entity_id is None else f"{entity_type} '{entity_id}'"
        super().__init__(f"Could not {operation} {target}")
