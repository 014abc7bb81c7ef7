"""Application registry – machine store keyed by identity."""
from vendbus.application.registry.in_memory import InMemoryMachineRegistry

__all__ = ["InMemoryMachineRegistry"]
