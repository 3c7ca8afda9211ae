from infrastructure.blob_store import MemoryBlobStore
from infrastructure.constants import TIME_SLOTS
from reservations.models import Booking
from reservations.slots import SlotIndex
from reservations.store import BookingRepository, BookingStore


def _store_with(*slots):
    store = BookingStore(BookingRepository(MemoryBlobStore()))
    for index, (date, time) in enumerate(slots):
        store.add(Booking(id=f'b{index}', date=date, time=time, name=f'Guest {index}', message='', password='pw'))
    return store


def test_counts_and_labels_follow_the_store():
    store = _store_with(('2025-11-29', '10:00'), ('2025-11-29', '10:00'), ('2025-11-30', '10:00'))
    slots = SlotIndex(store)

    assert slots.count('2025-11-29', '10:00') == 2
    assert slots.label('2025-11-29', '10:00') == '2/3'
    assert slots.is_full('2025-11-29', '10:00') is False

    store.add(Booking(id='late', date='2025-11-29', time='10:00', name='Late', message='', password='pw'))

    assert slots.is_full('2025-11-29', '10:00') is True
    assert [booking.id for booking in slots.bookings_for('2025-11-29', '10:00')] == ['b0', 'b1', 'late']


def test_occupancy_lists_every_time_slot_in_order():
    store = _store_with(('2025-11-29', '10:30'), ('2025-11-29', '17:30'), ('2025-12-01', '10:30'))

    occupancy = SlotIndex(store).occupancy('2025-11-29')

    assert [time for time, _ in occupancy] == list(TIME_SLOTS)
    assert dict(occupancy)['10:30'] == 1
    assert dict(occupancy)['17:30'] == 1
    assert sum(count for _, count in occupancy) == 2


def test_custom_capacity():
    store = _store_with(('2025-11-29', '10:00'))
    slots = SlotIndex(store, capacity=1)

    assert slots.is_full('2025-11-29', '10:00') is True
    assert slots.label('2025-11-29', '10:00') == '1/1'
