"""Registry of hypervolume algorithms.

Algorithms are registered as factories and retrieved by name, so the choice
of algorithm can come from a configuration value instead of an import.

Basic usage:
    ```python
    from exact_hv.registry import HypervolumeRegistry, list_algorithms

    # Get a configured algorithm
    algorithm = HypervolumeRegistry.get("wfg", n_workers=4)
    volume = algorithm(points, reference_point)

    # List available algorithms
    available = list_algorithms()  # ["sweep_2d", "wfg"]
    ```

Registering a custom algorithm:
    ```python
    HypervolumeRegistry.register("my_hv", lambda: my_hypervolume)
    ```
"""

from collections.abc import Callable
from functools import partial

from exact_hv.engine import compute
from exact_hv.protocols import HypervolumeAlgorithm
from exact_hv.sweep import sweep_2d


class HypervolumeRegistry:
    """Registry for hypervolume algorithms.

    The registry stores factory functions that accept keyword arguments and
    return HypervolumeAlgorithm callables, so algorithms can be configured at
    retrieval time.

    Class Attributes:
        _registry: Dictionary mapping algorithm names to factory functions.
    """

    _registry: dict[str, Callable[..., HypervolumeAlgorithm]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., HypervolumeAlgorithm]) -> None:
        """Register a hypervolume algorithm factory.

        Args:
            name: Unique name for the algorithm. Will overwrite if already exists.
            factory: Callable that returns a HypervolumeAlgorithm. Should accept
                keyword arguments for configuration.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> HypervolumeAlgorithm:
        """Get a configured hypervolume algorithm by name.

        Args:
            name: Name of the registered algorithm.
            **kwargs: Configuration parameters passed to the factory function.

        Returns:
            A configured HypervolumeAlgorithm callable.

        Raises:
            KeyError: If the name is not registered. Error message includes
                list of available algorithms.

        Example:
            ```python
            algorithm = HypervolumeRegistry.get("sweep_2d")
            volume = algorithm([[0.3, 0.5], [0.6, 0.2]], [1.0, 1.0])
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Hypervolume algorithm '{name}' not found. Available algorithms: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered algorithm names."""
        return sorted(cls._registry.keys())


def wfg_algorithm(n_workers: int = 1) -> HypervolumeAlgorithm:
    """Create the recursive slicing algorithm.

    Args:
        n_workers: Number of joblib workers for the top-level sum.

    Returns:
        compute bound to n_workers.
    """
    return partial(compute, n_workers=n_workers)


def sweep_2d_algorithm() -> HypervolumeAlgorithm:
    """Create the two-objective sweep algorithm."""
    return sweep_2d


def list_algorithms() -> list[str]:
    """List all registered hypervolume algorithms.

    Convenience function that returns HypervolumeRegistry.list().
    """
    return HypervolumeRegistry.list()


# Register built-in algorithms
HypervolumeRegistry.register("wfg", wfg_algorithm)
HypervolumeRegistry.register("sweep_2d", sweep_2d_algorithm)
