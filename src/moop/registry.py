"""Registry system for selection and survival strategies.

Instead of hardcoding strategies inside the drivers, factories are
registered under a name and looked up with optional configuration:

    ```python
    from moop.registry import SelectionRegistry, list_selections

    selector = SelectionRegistry.get("crowded", tournament_size=3)
    available = list_selections()  # ["crowded", "roulette"]
    ```

There are two independent registries:
1. **SelectionRegistry**: parent selection (ParentSelector protocol)
2. **SurvivalRegistry**: survivor selection (SurvivorSelector protocol)

The built-in strategies register themselves when moop.selection and
moop.survival are imported.
"""

from collections.abc import Callable

from moop.protocols import ParentSelector, SurvivorSelector


class SelectionRegistry:
    """Registry for parent selection strategy factories.

    Class Attributes:
        _registry: Maps strategy names to factories returning ParentSelector
            callables.
    """

    _registry: dict[str, Callable[..., ParentSelector]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., ParentSelector]) -> None:
        """Register a parent selection factory. Overwrites an existing name."""
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> ParentSelector:
        """Build a configured parent selector by name.

        Args:
            name: Name of the registered strategy.
            **kwargs: Configuration passed to the factory.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available strategies.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Selection strategy '{name}' not found. Available strategies: {available}")
        return cls._registry[name](**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted registered strategy names."""
        return sorted(cls._registry.keys())


class SurvivalRegistry:
    """Registry for survivor selection strategy factories.

    Class Attributes:
        _registry: Maps strategy names to factories returning SurvivorSelector
            callables.
    """

    _registry: dict[str, Callable[..., SurvivorSelector]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., SurvivorSelector]) -> None:
        """Register a survivor selection factory. Overwrites an existing name."""
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> SurvivorSelector:
        """Build a configured survivor selector by name.

        Raises:
            KeyError: If the name is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Survival strategy '{name}' not found. Available strategies: {available}")
        return cls._registry[name](**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted registered strategy names."""
        return sorted(cls._registry.keys())


def list_selections() -> list[str]:
    """List all registered parent selection strategies."""
    return SelectionRegistry.list()


def list_survivals() -> list[str]:
    """List all registered survivor selection strategies."""
    return SurvivalRegistry.list()
