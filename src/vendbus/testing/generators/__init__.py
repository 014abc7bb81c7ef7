"""Testing generators – hypothesis strategies for machine events."""
from vendbus.testing.generators.strategies import (
    machine_id_strategy,
    quantity_strategy,
    stock_event_strategy,
)

__all__ = ["machine_id_strategy", "quantity_strategy", "stock_event_strategy"]
