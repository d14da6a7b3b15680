"""
Named registry for interchangeable sampling routines.

Usage
-----
    samplers = MethodRegistry("sphere_sampler")

    @samplers.register("rotation")
    def rotation_point(rng): ...

    fn = samplers["rotation"]
    samplers.available()  # ["rotation"]
"""

from typing import Callable, Optional


class MethodRegistry:
    """Maps method names to callables.

    Parameters
    ----------
    name : str
        Registry name used in error messages (e.g., "sphere_sampler").
    """

    def __init__(self, name: str):
        self.name = name
        self._methods: dict[str, Callable] = {}

    def register(self, key: str, fn: Optional[Callable] = None):
        """Register ``fn`` under ``key``; without ``fn`` acts as a decorator."""
        if fn is None:
            def decorator(f):
                self._methods[key] = f
                return f
            return decorator
        self._methods[key] = fn
        return fn

    def __getitem__(self, key: str) -> Callable:
        try:
            return self._methods[key]
        except KeyError:
            raise KeyError(
                f"Unknown {self.name} method: {key!r}. "
                f"Available: {self.available()}"
            ) from None

    def __contains__(self, key: str) -> bool:
        return key in self._methods

    def available(self) -> list[str]:
        return list(self._methods)
