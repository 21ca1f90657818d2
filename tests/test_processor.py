from stockwise.models import DemandModel, Event
from stockwise.processor import Processor
from stockwise.store import StateStore

TS = "2026-04-28T09:00:00+05:30"


def test_stock_update_sets_stock():
    store = StateStore()
    assert Processor(store).process(Event.stock_update("milk", 35, TS)) is True
    assert store.get_stock("milk") == 35
    assert store.recent_sales("milk") == []


def test_sale_reduces_stock_and_records():
    store = StateStore()
    processor = Processor(store)
    processor.process(Event.stock_update("milk", 35, TS))
    assert processor.process(Event.sale("milk", 12, TS)) is True
    assert store.get_stock("milk") == 35 - 12
    assert store.recent_sales("milk") == [12]
    assert store.get_demand_model("milk").mean == 12.0


def test_sale_beyond_stock_clamps_to_zero():
    store = StateStore()
    processor = Processor(store)
    processor.process(Event.stock_update("laptop", 3, TS))
    processor.process(Event.sale("laptop", 5, TS))
    assert store.get_stock("laptop") == 0


def test_invalid_events_rejected_without_changes():
    store = StateStore()
    processor = Processor(store)
    assert processor.process(Event.sale("", 5, TS)) is False
    assert processor.process(Event.sale("milk", -1, TS)) is False
    assert processor.process(Event.stock_update("milk", -1, TS)) is False
    assert store.get_stock("milk") == 0
    assert store.recent_sales("milk") == []
    assert store.get_demand_model("milk") == DemandModel(0.0, 0.25)


def test_zero_quantity_sale_is_accepted():
    store = StateStore()
    assert Processor(store).process(Event.sale("rice", 0, TS)) is True
    assert store.recent_sales("rice") == [0]