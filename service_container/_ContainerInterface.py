from abc import ABC, abstractmethod


class ContainerInterface(ABC):
    @abstractmethod
    def add(self, name, factory, singleton=True):
        """Register ``factory`` under ``name``."""

    @abstractmethod
    def get(self, name):
        """Return the helper registered under ``name``."""

    @abstractmethod
    def has(self, name) -> bool:
        """Return True if a helper is registered under ``name``."""
