"""In-memory storage adapters."""

from .blueprint_store import BlueprintStore, InMemoryBlueprintStore
from .seed import demo_blueprints

__all__ = ["BlueprintStore", "InMemoryBlueprintStore", "demo_blueprints"]
