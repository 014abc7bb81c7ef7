"""Unit tests for the sale, refill and notification handlers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st
from structlog.testing import capture_logs

from vendbus.application.handlers import (
    MachineRefillHandler,
    MachineSaleHandler,
    StockLevelOKHandler,
    StockWarningHandler,
)
from vendbus.application.pubsub import InProcessPublishSubscribeService
from vendbus.application.registry import InMemoryMachineRegistry
from vendbus.domain import (
    EventType,
    Machine,
    MachineRefillEvent,
    MachineSaleEvent,
    StockLevelOKEvent,
    StockWarningEvent,
)
from vendbus.kernel.errors import MachineNotFoundError, UnexpectedEventError
from vendbus.testing.fakes import RecordingSubscriber
from vendbus.testing.generators import stock_event_strategy


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class Harness:
    """Registry + bus with real sale/refill handlers and recording observers."""

    def __init__(self, stock: dict[str, int], threshold: int = 3) -> None:
        self.registry = InMemoryMachineRegistry(Machine(mid, level) for mid, level in stock.items())
        self.bus = InProcessPublishSubscribeService()
        self.journal: list[str] = []
        self.warnings = RecordingSubscriber("warning", self.journal)
        self.oks = RecordingSubscriber("ok", self.journal)
        self.bus.subscribe(
            EventType.SALE,
            RecordingSubscriber(
                "sale",
                self.journal,
                delegate=MachineSaleHandler(self.registry, self.bus, threshold=threshold),
            ),
        )
        self.bus.subscribe(
            EventType.REFILL,
            RecordingSubscriber(
                "refill",
                self.journal,
                delegate=MachineRefillHandler(self.registry, self.bus, threshold=threshold),
            ),
        )
        self.bus.subscribe(EventType.WARNING, self.warnings)
        self.bus.subscribe(EventType.OK, self.oks)

    def stock(self, machine_id: str) -> int:
        return self.registry.lookup(machine_id).stock_level


@pytest.fixture
def harness() -> Harness:
    return Harness({"001": 5, "002": 5, "003": 5})


# ---------------------------------------------------------------------------
# Sale handler
# ---------------------------------------------------------------------------


class TestMachineSaleHandler:
    def test_sale_crossing_threshold_warns_once(self, harness: Harness) -> None:
        harness.bus.publish(MachineSaleEvent("001", 3))

        assert harness.stock("001") == 2
        assert len(harness.warnings.received) == 1
        warning = harness.warnings.received[0]
        assert isinstance(warning, StockWarningEvent)
        assert warning.machine_id == "001"
        assert warning.remaining_quantity == 2

    def test_other_machines_untouched(self, harness: Harness) -> None:
        harness.bus.publish(MachineSaleEvent("001", 3))
        assert harness.stock("002") == 5
        assert harness.stock("003") == 5

    def test_warning_is_edge_triggered(self, harness: Harness) -> None:
        harness.bus.publish(MachineSaleEvent("001", 3))
        harness.bus.publish(MachineSaleEvent("001", 1))

        assert harness.stock("001") == 1
        assert harness.warnings.call_count == 1

    def test_sale_staying_above_threshold_is_silent(self, harness: Harness) -> None:
        harness.bus.publish(MachineSaleEvent("001", 2))
        assert harness.stock("001") == 3
        assert harness.warnings.call_count == 0

    def test_oversized_sale_goes_negative(self, harness: Harness) -> None:
        harness.bus.publish(MachineSaleEvent("002", 5))
        harness.bus.publish(MachineSaleEvent("002", 3))

        assert harness.stock("002") == -3
        assert [w.remaining_quantity for w in harness.warnings.received] == [0]

    @pytest.mark.parametrize(
        ("initial", "sold", "remaining"),
        [(5, 6, -1), (3, 5, -2)],
    )
    def test_crossing_sale_ending_below_zero_warns(self, initial: int, sold: int, remaining: int) -> None:
        h = Harness({"001": initial})

        h.bus.publish(MachineSaleEvent("001", sold))

        assert h.stock("001") == remaining
        assert [w.remaining_quantity for w in h.warnings.received] == [remaining]
        assert h.journal == ["sale:MachineSaleEvent", "warning:StockWarningEvent"]

    def test_sale_from_exactly_threshold_warns(self) -> None:
        h = Harness({"001": 3})
        h.bus.publish(MachineSaleEvent("001", 1))
        assert [w.remaining_quantity for w in h.warnings.received] == [2]

    def test_derived_warning_handled_before_publish_returns(self, harness: Harness) -> None:
        harness.bus.publish(MachineSaleEvent("001", 3))
        assert harness.journal == ["sale:MachineSaleEvent", "warning:StockWarningEvent"]

    def test_unknown_machine_is_fatal(self, harness: Harness) -> None:
        with pytest.raises(MachineNotFoundError):
            harness.bus.publish(MachineSaleEvent("999", 1))
        assert harness.warnings.call_count == 0

    def test_logs_sale_then_warning(self) -> None:
        registry = InMemoryMachineRegistry([Machine("001", 5)])
        bus = InProcessPublishSubscribeService()
        bus.subscribe(EventType.SALE, MachineSaleHandler(registry, bus))
        bus.subscribe(EventType.WARNING, StockWarningHandler())

        with capture_logs() as logs:
            bus.publish(MachineSaleEvent("001", 3))

        handled = [e for e in logs if e["event"] in ("sale.handled", "stock.warning")]
        assert [e["event"] for e in handled] == ["sale.handled", "stock.warning"]
        assert handled[0]["machine_id"] == "001"
        assert handled[0]["sold"] == 3
        assert handled[0]["stock_level"] == 2
        assert handled[1]["log_level"] == "warning"
        assert handled[1]["stock_level"] == 2

    def test_custom_threshold(self) -> None:
        h = Harness({"001": 10}, threshold=8)
        h.bus.publish(MachineSaleEvent("001", 3))
        assert h.warnings.call_count == 1
        assert h.warnings.received[0].remaining_quantity == 7  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Refill handler
# ---------------------------------------------------------------------------


class TestMachineRefillHandler:
    def test_refill_is_edge_triggered(self) -> None:
        h = Harness({"001": 1})
        h.bus.publish(MachineRefillEvent("001", 3))
        h.bus.publish(MachineRefillEvent("001", 2))

        assert h.stock("001") == 6
        assert h.oks.call_count == 1
        ok = h.oks.received[0]
        assert isinstance(ok, StockLevelOKEvent)
        assert ok.remaining_quantity == 4

    def test_refill_not_reaching_threshold_is_silent(self) -> None:
        h = Harness({"001": 0})
        h.bus.publish(MachineRefillEvent("001", 2))
        assert h.stock("001") == 2
        assert h.oks.call_count == 0

    def test_refill_when_already_healthy_is_silent(self, harness: Harness) -> None:
        harness.bus.publish(MachineRefillEvent("003", 5))
        assert harness.stock("003") == 10
        assert harness.oks.call_count == 0

    def test_refill_from_negative_stock(self) -> None:
        h = Harness({"001": 0})
        h.bus.publish(MachineSaleEvent("001", 4))
        h.bus.publish(MachineRefillEvent("001", 7))
        assert h.stock("001") == 3
        assert h.oks.call_count == 1

    def test_refill_landing_exactly_on_threshold_is_ok(self) -> None:
        h = Harness({"001": 2})
        h.bus.publish(MachineRefillEvent("001", 1))
        assert [o.remaining_quantity for o in h.oks.received] == [3]

    def test_derived_ok_handled_before_publish_returns(self) -> None:
        h = Harness({"001": 2})
        h.bus.publish(MachineRefillEvent("001", 5))
        assert h.journal == ["refill:MachineRefillEvent", "ok:StockLevelOKEvent"]

    def test_unknown_machine_is_fatal(self, harness: Harness) -> None:
        with pytest.raises(MachineNotFoundError):
            harness.bus.publish(MachineRefillEvent("404", 1))


# ---------------------------------------------------------------------------
# Notification handlers
# ---------------------------------------------------------------------------


class TestNotificationHandlers:
    def test_warning_records_notification(self) -> None:
        handler = StockWarningHandler()
        handler.handle(StockWarningEvent("001", 2))
        assert list(handler.notifications) == ["StockWarningEvent, machine=001, stock_left=2"]
        assert handler.handled_count == 1

    def test_ok_logs_info(self) -> None:
        handler = StockLevelOKHandler()
        with capture_logs() as logs:
            handler.handle(StockLevelOKEvent("002", 5))
        assert logs == [
            {
                "event": "stock.ok",
                "event_type": "StockLevelOKEvent",
                "machine_id": "002",
                "stock_level": 5,
                "log_level": "info",
            }
        ]

    def test_history_is_bounded(self) -> None:
        handler = StockWarningHandler(history=2)
        for remaining in (2, 1, 0):
            handler.handle(StockWarningEvent("001", remaining))
        assert len(handler.notifications) == 2
        assert handler.handled_count == 3

    def test_terminal_handlers_do_not_publish(self) -> None:
        bus = InProcessPublishSubscribeService()
        spy = RecordingSubscriber()
        for tag in EventType:
            bus.subscribe(tag, spy)
        StockWarningHandler().handle(StockWarningEvent("001", 1))
        StockLevelOKHandler().handle(StockLevelOKEvent("001", 4))
        assert spy.call_count == 0


# ---------------------------------------------------------------------------
# Variant checking
# ---------------------------------------------------------------------------


class TestVariantChecking:
    def test_miswired_handler_rejects_event(self) -> None:
        registry = InMemoryMachineRegistry([Machine("001", 5)])
        bus = InProcessPublishSubscribeService()
        bus.subscribe(EventType.REFILL, MachineSaleHandler(registry, bus))

        with pytest.raises(UnexpectedEventError) as exc_info:
            bus.publish(MachineRefillEvent("001", 3))

        assert exc_info.value.expected == "MachineSaleEvent"
        assert exc_info.value.received == "MachineRefillEvent"
        assert registry.lookup("001").stock_level == 5

    def test_warning_handler_rejects_ok_event(self) -> None:
        with pytest.raises(UnexpectedEventError):
            StockWarningHandler().handle(StockLevelOKEvent("001", 3))

    def test_handlers_declare_their_tags(self) -> None:
        assert MachineSaleHandler.event_type is EventType.SALE
        assert MachineRefillHandler.event_type is EventType.REFILL
        assert StockWarningHandler.event_type is EventType.WARNING
        assert StockLevelOKHandler.event_type is EventType.OK


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


MACHINES = ["001", "002", "003"]


@given(
    initial=st.integers(min_value=0, max_value=10),
    events=st.lists(stock_event_strategy(MACHINES, max_quantity=6), max_size=40),
)
def test_stock_equals_initial_minus_sales_plus_refills(initial: int, events: list) -> None:
    h = Harness({mid: initial for mid in MACHINES})
    for event in events:
        h.bus.publish(event)

    for mid in MACHINES:
        sold = sum(e.quantity for e in events if e.machine_id == mid and isinstance(e, MachineSaleEvent))
        refilled = sum(
            e.quantity for e in events if e.machine_id == mid and isinstance(e, MachineRefillEvent)
        )
        assert h.stock(mid) == initial - sold + refilled


@given(
    initial=st.integers(min_value=0, max_value=10),
    events=st.lists(stock_event_strategy(MACHINES, max_quantity=6), max_size=40),
)
def test_notifications_match_threshold_crossings(initial: int, events: list) -> None:
    h = Harness({mid: initial for mid in MACHINES})
    level = {mid: initial for mid in MACHINES}
    expected_warnings = expected_oks = 0
    for event in events:
        before = level[event.machine_id]
        if isinstance(event, MachineSaleEvent):
            level[event.machine_id] -= event.quantity
            expected_warnings += before >= 3 > level[event.machine_id]
        else:
            level[event.machine_id] += event.quantity
            expected_oks += before < 3 <= level[event.machine_id]
        h.bus.publish(event)

    assert h.warnings.call_count == expected_warnings
    assert h.oks.call_count == expected_oks
