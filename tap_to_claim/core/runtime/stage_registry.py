"""
stage_registry.py
-----------------
Ordered, explicit table of stage names to stage classes.

The controller receives a registry at construction instead of looking
stages up in a global; tests build their own registries with stub stages.
"""

from typing import Dict, List, Optional, Type

from tap_to_claim.core.debug.debug_logger import DebugLogger


class StageRegistry:
    """Fixed stage order plus name -> class lookup."""

    def __init__(self):
        self._classes: Dict[str, Type] = {}
        self._order: List[str] = []

    def register(self, name: str, stage_class: Type):
        """
        Append a stage to the sequence.

        Raises:
            ValueError: If ``name`` is already registered
        """
        if name in self._classes:
            raise ValueError(f"Stage '{name}' is already registered")
        self._classes[name] = stage_class
        self._order.append(name)
        DebugLogger.init_sub(f"Registered stage '{name}' ({stage_class.__name__})")
        return self

    def get(self, name: str) -> Optional[Type]:
        return self._classes.get(name)

    def index_of(self, name: str) -> int:
        return self._order.index(name) if name in self._classes else -1

    @property
    def names(self) -> List[str]:
        return list(self._order)

    def __contains__(self, name) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._order)
