"""Domain layer: identifiers, entities, enums and exceptions."""
