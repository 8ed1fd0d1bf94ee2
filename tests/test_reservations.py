from types import SimpleNamespace

import pytest

from voyageplan.database import PlanningDatabase
from voyageplan.models import Moment
from voyageplan.offers import Offer
from voyageplan.reservations import Booking, ReservationGroup, iter_bookings


def _root(name="Voyage de Test"):
    root = ReservationGroup(name, "", True)
    root.set_trip(SimpleNamespace(name=name))
    return root


def test_group_announces_itself_masculine(capsys):
    root = _root()
    segment = ReservationGroup("S1", "segment", True)
    root.add(segment)
    out = capsys.readouterr().out
    assert out == "  Segment S1 cree dans le Voyage de Test!\n"
    assert segment.depth == 1
    assert segment.parent is root


def test_group_announces_itself_feminine(capsys):
    root = _root()
    segment = ReservationGroup("S1", "segment", True)
    root.add(segment)
    day = ReservationGroup("2024-10-26", "journee", False)
    segment.add(day)
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "    Journee 2024-10-26 creee dans le segment S1!"
    assert day.depth == 2


def test_booking_added_prints_and_records(capsys):
    root = _root("T")
    segment = ReservationGroup("S", "segment", True)
    root.add(segment)
    day = ReservationGroup("2024-10-26", "journee", False)
    segment.add(day)
    planning = PlanningDatabase()
    booking = Booking(Offer("Vol", 100, "CAD"), Moment("2024-10-26"), planning)
    capsys.readouterr()
    day.add(booking)
    assert capsys.readouterr().out == "      Reservation creee : T/2024-10-26/Vol!\n"
    assert planning.elements == [booking]
    assert booking.trip is root.trip


def test_booking_without_trip_raises():
    group = ReservationGroup("D", "journee", False)
    with pytest.raises(RuntimeError):
        group.add(Booking(Offer("Vol", 100, "CAD"), Moment("2024-10-26")))


def test_booking_name_comes_from_offer():
    booking = Booking(Offer("Hotel Stella", 80, "EUR"), Moment("2024-10-27"))
    assert booking.name == "Hotel Stella"


def test_price_cad_non_euro_is_offer_price():
    offer = Offer("Vol", 100, "EUR")
    booking = Booking(offer, Moment("2024-10-26"))
    assert booking.price_cad() == offer.current_price()


def test_price_cad_converts_euro():
    booking = Booking(Offer("Vol", 100, "EURO"), Moment("2024-10-26"))
    try:
        Booking.set_euro_rate(2.0)
        assert booking.price_cad() == 200
    finally:
        Booking.set_euro_rate(1.5)


def test_show_booking(capsys):
    booking = Booking(Offer("Vol", 100, "CAD"), Moment("2024-10-26"))
    text = booking.show()
    assert text == "   Reservation Vol, prix total ($CA): 100\n"
    assert capsys.readouterr().out == "   Reservation Vol, prix total ($CA): 100.\n"


def test_show_group_returns_name(capsys):
    group = ReservationGroup("France", "segment", True)
    assert group.show() == "France"
    assert capsys.readouterr().out == "France\n"


def test_iter_bookings_breadth_first():
    root = _root()
    seg = ReservationGroup("S", "segment", True)
    root.add(seg)
    b0 = Booking(Offer("A", 1, "CAD"), Moment("d0"))
    root.add(b0)
    day1 = ReservationGroup("d1", "journee", False)
    day2 = ReservationGroup("d2", "journee", False)
    seg.add(day1)
    seg.add(day2)
    b1 = Booking(Offer("B", 2, "CAD"), Moment("d1"))
    b2 = Booking(Offer("C", 3, "CAD"), Moment("d2"))
    day1.add(b1)
    day2.add(b2)
    assert list(iter_bookings(root)) == [b0, b1, b2]


def test_iter_bookings_single_booking():
    booking = Booking(Offer("A", 1, "CAD"), Moment("d"))
    assert list(iter_bookings(booking)) == [booking]


def test_iter_bookings_empty_group():
    assert list(iter_bookings(ReservationGroup("x", "segment", True))) == []


def test_remove_named_group(capsys):
    root = _root()
    keep = ReservationGroup("Keep", "segment", True)
    drop = ReservationGroup("Portugal", "segment", True)
    root.add(keep)
    root.add(drop)
    capsys.readouterr()
    root.remove("Portugal")
    assert root.reservations == [keep]
    assert capsys.readouterr().out == "  Segment Portugal efface!\n"


def test_remove_is_recursive():
    root = _root()
    seg = ReservationGroup("S", "segment", True)
    root.add(seg)
    day = ReservationGroup("d", "journee", False)
    seg.add(day)
    booking = Booking(Offer("Vol", 1, "CAD"), Moment("d"))
    day.add(booking)
    root.remove("Vol")
    assert day.reservations == []
    assert root.reservations == [seg]


def test_set_trip_propagates():
    root = ReservationGroup("R", "", True)
    seg = ReservationGroup("S", "segment", True)
    root.reservations.append(seg)
    trip = SimpleNamespace(name="R")
    root.set_trip(trip)
    assert seg.trip is trip


def test_cancel_group_clears_children():
    root = _root()
    root.add(ReservationGroup("S", "segment", True))
    root.cancel()
    assert root.reservations == []


def test_copy_is_deep():
    root = _root()
    seg = ReservationGroup("S", "segment", True)
    root.add(seg)
    day = ReservationGroup("d", "journee", False)
    seg.add(day)
    offer = Offer("Vol", 10, "CAD")
    booking = Booking(offer, Moment("d", "19h"))
    day.add(booking)

    duplicate = root.copy()
    copied = list(iter_bookings(duplicate))
    assert len(copied) == 1
    assert copied[0] is not booking
    assert copied[0].offer is offer
    assert copied[0].moment == booking.moment
    assert copied[0].moment is not booking.moment
    assert copied[0].name == booking.name
    assert duplicate.reservations[0] is not seg
    assert duplicate.reservations[0].name == seg.name

    duplicate.remove("S")
    assert root.reservations == [seg]