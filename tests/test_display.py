import pytest

from voyageplan.display import Display, get_display
from voyageplan.models import Comment, Moment, Traveller
from voyageplan.offers import CommentedOffer, Offer
from voyageplan.reservations import Booking, ReservationGroup
from voyageplan.trip import Trip


def build_trip(day_names=("2024-10-27",), offer=None):
    trip = Trip("Voyage", Traveller("Dora"))
    for index, day_name in enumerate(day_names):
        segment = ReservationGroup(f"S{index}", "segment", True)
        trip.add(segment)
        day = ReservationGroup(day_name, "journee", False)
        segment.add(day)
        day.add(Booking(offer or Offer("Hotel", 100, "CAD"), Moment(day_name)))
    return trip


def test_show_message_prints_and_keeps(capsys):
    display = Display()
    display.show_message("bonjour")
    assert display.messages == ["bonjour"]
    assert capsys.readouterr().out == "bonjour\n"


def test_export_writes_and_clears(tmp_path):
    display = Display()
    display.filename = tmp_path / "log.txt"
    display.show_message("a")
    display.export()
    display.show_message("b")
    display.export()
    assert (tmp_path / "log.txt").read_text(encoding="utf-8") == "a\nb\n"
    assert display.messages == []


def test_export_without_filename_raises():
    display = Display()
    display.show_message("a")
    with pytest.raises(ValueError):
        display.export()
    assert display.messages == ["a"]


def test_show_trip_messages():
    trip = build_trip()
    display = Display()
    display.show_trip(trip)
    assert display.messages == [
        "Voyage:\n",
        "  Journee : 2024-10-27:\n",
        "   Reservation Hotel, prix total ($CA): 100\n",
    ]


def test_repeated_day_is_announced_once():
    trip = build_trip(("2024-10-31", "2024-10-31"))
    display = Display()
    display.show_trip(trip)
    day_lines = [m for m in display.messages if m.startswith("  Journee")]
    assert day_lines == ["  Journee : 2024-10-31:\n"]
    assert len(display.messages) == 4


def test_offer_comments_are_shown(capsys):
    offer = CommentedOffer(Offer("Louvre", 20, "EUR"))
    offer.add_comment(Comment("Rabais"))
    trip = build_trip(offer=offer)
    display = Display()
    display.show_trip(trip)
    assert display.messages[-1] == "    Commentaire: Rabais"
    assert "    Commentaire: Rabais\n" in capsys.readouterr().out


def test_get_display_is_shared(capsys):
    first = get_display()
    first.show_message("partage")
    second = get_display()
    try:
        assert second is first
        assert second.messages[-1] == "partage"
        assert capsys.readouterr().out == "partage\n"
    finally:
        first.messages.clear()