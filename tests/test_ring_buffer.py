import pytest

from tvsc.buffer import Buffer
from tvsc.ring_buffer import RingBuffer


class SequentialDataSource:
    def __init__(self):
        self.prev_element = 0
        self.next_element = 0
        self.num_supply_calls = 0
        self.data_needed = False
        self.ring = None

    def _signal(self, _ring):
        self.data_needed = True

    def connect(self, ring):
        self.ring = ring
        ring.set_data_needed_callback(self._signal)

    def try_supply(self, num_elements):
        total = 0
        self.prev_element = self.next_element
        page_size = self.ring.mtu()
        while num_elements > total:
            count = min(page_size, num_elements - total)
            chunk = list(range(self.next_element, self.next_element + count))
            self.next_element += count
            self.data_needed = False
            total += self.ring.supply(chunk)
            self.num_supply_calls += 1
        return total


class InspectableDataSink:
    def __init__(self, page_size):
        self.buffer = Buffer(page_size)
        self.data_available = False
        self.ring = None

    def _signal(self, _ring):
        self.data_available = True

    def connect(self, ring):
        self.ring = ring
        ring.set_data_available_callback(self._signal)

    def try_consume(self):
        self.data_available = False
        return self.ring.consume_into(self.buffer)


SIZES = [(2, 3), (8, 8), (1024, 16), (2048, 512)]
SIZE_IDS = [f"{p}x{n}" for p, n in SIZES]


def make(sizes, prioritize_old=True):
    page_size, num_pages = sizes
    ring = RingBuffer(page_size, num_pages, prioritize_old)
    source = SequentialDataSource()
    sink = InspectableDataSink(page_size)
    return ring, source, sink


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_can_use_without_data_source(sizes):
    ring, _, sink = make(sizes)
    sink.connect(ring)
    assert ring.supply_one(1) is True
    assert sink.try_consume() == 1
    assert sink.buffer[0] == 1


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_calls_data_needed_on_construction(sizes):
    ring, source, sink = make(sizes)
    assert not source.data_needed
    assert not sink.data_available
    source.connect(ring)
    sink.connect(ring)
    assert source.data_needed
    assert not sink.data_available


def test_constructor_callbacks_are_signalled():
    calls = []
    ring = RingBuffer(4, 2, True, lambda r: calls.append("needed"), lambda r: calls.append("available"))
    assert calls == ["needed"]
    assert ring.empty()


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_can_accept_data_from_source(sizes):
    ring, source, _ = make(sizes)
    source.connect(ring)
    source.try_supply(1)
    assert ring.elements_available() == 1


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_source_can_write_an_mtu(sizes):
    ring, source, _ = make(sizes)
    source.connect(ring)
    assert source.try_supply(ring.mtu()) == ring.mtu()
    assert ring.elements_available() == ring.mtu()
    assert source.next_element == ring.mtu()


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_source_can_write_mtu_then_single_element(sizes):
    ring, source, _ = make(sizes)
    source.connect(ring)
    assert source.try_supply(ring.mtu()) == ring.mtu()
    assert source.try_supply(1) == 1
    assert ring.elements_available() == ring.mtu() + 1
    assert source.next_element == ring.mtu() + 1


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_source_can_write_two_mtus(sizes):
    ring, source, _ = make(sizes)
    source.connect(ring)
    assert source.try_supply(ring.mtu()) == ring.mtu()
    assert source.try_supply(ring.mtu()) == ring.mtu()
    assert ring.elements_available() == 2 * ring.mtu()
    assert source.next_element == 2 * ring.mtu()


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_sink_notified_on_write_of_mtu(sizes):
    ring, source, sink = make(sizes)
    source.connect(ring)
    sink.connect(ring)
    source.try_supply(ring.mtu())
    assert sink.data_available


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_sink_can_read_single_element(sizes):
    ring, source, sink = make(sizes)
    source.connect(ring)
    sink.connect(ring)
    source.try_supply(1)
    assert sink.try_consume() == 1
    assert sink.buffer[0] == source.prev_element


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_sink_can_read_mtu(sizes):
    ring, source, sink = make(sizes)
    source.connect(ring)
    sink.connect(ring)
    source.try_supply(ring.mtu())
    assert sink.data_available
    assert sink.try_consume() == ring.mtu()
    assert list(sink.buffer) == list(
        range(source.prev_element, source.prev_element + ring.mtu())
    )


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_can_peek_single_element(sizes):
    ring, _, _ = make(sizes)
    ring.supply_one(1)
    assert ring.peek() == 1
    assert ring.elements_available() == 1


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_can_peek_pop_single_element(sizes):
    ring, _, _ = make(sizes)
    ring.supply_one(1)
    assert ring.peek() == 1
    assert ring.pop() == 1
    assert ring.empty()


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_sink_not_notified_below_mtu(sizes):
    ring, source, sink = make(sizes)
    source.connect(ring)
    sink.connect(ring)
    source.try_supply(ring.mtu() - 1)
    assert not sink.data_available


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_source_can_fill_ring(sizes):
    ring, source, sink = make(sizes)
    source.connect(ring)
    sink.connect(ring)
    written = source.try_supply(ring.max_buffered_elements())
    assert source.next_element == ring.max_buffered_elements()
    assert written == ring.max_buffered_elements()
    assert ring.elements_available() == ring.max_buffered_elements()
    assert ring.full()
    assert not source.data_needed


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_sink_can_drain_ring(sizes):
    ring, source, sink = make(sizes)
    source.connect(ring)
    sink.connect(ring)
    assert source.try_supply(ring.max_buffered_elements()) == ring.max_buffered_elements()
    assert not source.data_needed

    total = 0
    expected = source.prev_element
    while total < ring.max_buffered_elements():
        assert sink.data_available
        read = sink.try_consume()
        assert read == ring.mtu()
        assert list(sink.buffer) == list(range(expected, expected + read))
        expected += read
        total += read

    assert ring.elements_available() == 0
    assert not sink.data_available
    assert source.data_needed


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_caps_write_at_an_mtu(sizes):
    ring, source, sink = make(sizes)
    source.connect(ring)
    sink.connect(ring)
    to_write = ring.mtu() + 1
    assert source.try_supply(to_write) == to_write
    assert ring.elements_available() == to_write
    assert source.next_element == to_write
    assert source.num_supply_calls == 2


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_overfill_by_one_when_prioritizing_new(sizes):
    ring, source, sink = make(sizes, prioritize_old=False)
    source.connect(ring)
    sink.connect(ring)
    assert source.try_supply(ring.max_buffered_elements()) == ring.max_buffered_elements()
    assert ring.elements_available() == ring.max_buffered_elements()
    assert not source.data_needed
    assert source.try_supply(1) == 1


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_overfill_by_three_when_prioritizing_new(sizes):
    ring, source, sink = make(sizes, prioritize_old=False)
    source.connect(ring)
    sink.connect(ring)
    assert source.try_supply(ring.max_buffered_elements()) == ring.max_buffered_elements()
    assert not source.data_needed
    assert source.try_supply(3) == 3


@pytest.mark.parametrize("sizes", SIZES, ids=SIZE_IDS)
def test_overfill_by_mtu_when_prioritizing_new(sizes):
    ring, source, sink = make(sizes, prioritize_old=False)
    source.connect(ring)
    sink.connect(ring)
    assert source.try_supply(ring.max_buffered_elements()) == ring.max_buffered_elements()
    assert source.try_supply(ring.mtu()) == ring.mtu()


def test_tail_drop_refuses_when_full():
    ring = RingBuffer(2, 2)
    assert ring.supply([1, 2]) == 2
    assert ring.supply([3, 4]) == 2
    assert ring.full()
    assert ring.supply_one(5) is False
    assert ring.consume(4) == [1, 2]


def test_supply_stops_at_page_boundary():
    ring = RingBuffer(4, 2)
    assert ring.supply([1, 2, 3]) == 3
    assert ring.supply([4, 5, 6]) == 1
    assert ring.consume(10) == [1, 2, 3, 4]


def test_consume_stops_at_page_boundary():
    ring = RingBuffer(3, 3)
    ring.supply([1, 2, 3])
    ring.supply([4, 5])
    assert ring.consume(2) == [1, 2]
    assert ring.consume(5) == [3]
    assert ring.consume(5) == [4, 5]


def test_wraps_around_pages():
    ring = RingBuffer(2, 2)
    for value in range(20):
        assert ring.supply_one(value)
        assert ring.consume_one() == value
    assert ring.empty()


def test_consume_one_empty_raises():
    ring = RingBuffer(2, 2)
    with pytest.raises(IndexError):
        ring.consume_one()


def test_peek_empty_raises():
    ring = RingBuffer(2, 2)
    with pytest.raises(IndexError):
        ring.peek()


def test_pop_empty_raises():
    ring = RingBuffer(2, 2)
    with pytest.raises(IndexError):
        ring.pop()


def test_consume_into_list():
    ring = RingBuffer(4, 2)
    ring.supply([7, 8])
    dest = [0, 0, 0, 0]
    assert ring.consume_into(dest) == 2
    assert dest == [7, 8, 0, 0]


def test_geometry():
    ring = RingBuffer(8, 3)
    assert (ring.mtu(), ring.buffer_size(), ring.num_buffers()) == (8, 8, 3)
    assert ring.max_buffered_elements() == 24


@pytest.mark.parametrize("page_size,num_pages", [(0, 1), (1, 0), (-1, 2)])
def test_invalid_geometry_raises(page_size, num_pages):
    with pytest.raises(ValueError):
        RingBuffer(page_size, num_pages)