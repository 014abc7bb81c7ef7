"""
vendbus – synchronous publish/subscribe bus driving a vending machine
inventory simulation.

Import path convention::

    from vendbus.kernel.errors import MachineNotFoundError
    from vendbus.domain import Machine, MachineSaleEvent
    from vendbus.application.pubsub import InProcessPublishSubscribeService
    from vendbus.application.simulation import Simulation
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
