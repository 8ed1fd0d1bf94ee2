"""Command that plans the sample trips and writes their logs."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .database import (
    AccommodationDatabase,
    ExcursionDatabase,
    OfferDatabase,
    PlanningDatabase,
    TransportDatabase,
)
from .decorators import CommentedBooking, ModifiedBooking, replace_in_trip
from .display import get_display
from .models import Comment, Moment, Traveller
from .offers import CommentedOffer, Offer
from .pricing import DiscountStrategy, IncreaseStrategy
from .reservations import Booking, ReservationGroup
from .trip import Trip

STUDENT_DISCOUNT = 0.046


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="voyageplan",
        description="Plan the sample trips and export their reservation logs.",
    )
    parser.add_argument(
        "--data-dir",
        default="data",
        help="directory holding vol.csv, hebergement.csv and excursion.csv",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="directory the log files are appended to",
    )
    return parser.parse_args(argv)


def _day(date: str) -> ReservationGroup:
    return ReservationGroup(date, "journee", False)


def _segment(name: str) -> ReservationGroup:
    return ReservationGroup(name, "segment", True)


def _wrap_or_fail(wrapper, reservations, target):
    decorated = wrapper.wrap_in(reservations, target)
    if decorated is None:
        raise RuntimeError(f"reservation {target.name!r} could not be decorated")
    return decorated


def main(argv: Sequence[str] | None = None) -> int:
    """Build the offer databases, plan three trips and export their logs."""
    args = _parse_args(argv)
    data_dir = Path(args.data_dir)
    output_dir = Path(args.output_dir)

    # Offer databases
    offers = OfferDatabase()
    planning = PlanningDatabase()

    offers.add_category("transport", TransportDatabase())
    offers.add_category("hebergement", AccommodationDatabase())
    offers.add_category("excursion", ExcursionDatabase())

    offers.category("transport").load(data_dir / "vol.csv")
    offers.category("hebergement").load(data_dir / "hebergement.csv")
    offers.category("excursion").load(data_dir / "excursion.csv")

    transports = offers.category("transport").elements
    hotels = offers.category("hebergement").elements
    excursions = offers.category("excursion").elements

    for name, elements in (
        ("transport", transports),
        ("hebergement", hotels),
        ("excursion", excursions),
    ):
        for offer in elements:
            offers.category(name).add(offer)

    print()

    # Dora's trip
    dora = Trip("Voyage de Dora", Traveller("Dora"))

    france1 = _segment("France 1ère partie")
    day1026 = _day("2024-10-26")
    dora.add(france1)
    france1.add(day1026)
    day1026.add(Booking(transports[0], Moment("2024-10-26"), planning))

    day1027 = _day("2024-10-27")
    france1.add(day1027)
    hotel_stella = Booking(hotels[0], Moment("2024-10-27"), planning)
    day1027.add(hotel_stella)

    day1028 = _day("2024-10-28")
    france1.add(day1028)
    day1028.add(Booking(excursions[0], Moment("2024-10-28"), planning))
    day1028.add(Booking(hotels[0], Moment("2024-10-28"), planning))

    portugal = _segment("Portugal")
    day1029 = _day("2024-10-29")
    dora.add(portugal)
    portugal.add(day1029)
    day1029.add(Booking(transports[4], Moment("2024-10-29"), planning))
    day1029.add(Booking(hotels[1], Moment("2024-10-29"), planning))

    day1030 = _day("2024-10-30")
    portugal.add(day1030)
    day1030.add(Booking(excursions[3], Moment("2024-10-30"), planning))
    day1030.add(Booking(hotels[1], Moment("2024-10-30"), planning))

    return_flight = Booking(transports[10], Moment("2024-10-31"), planning)
    day1031_portugal = _day("2024-10-31")
    portugal.add(day1031_portugal)
    day1031_portugal.add(return_flight)

    france2 = _segment("France 2e partie")
    day1031 = _day("2024-10-31")
    dora.add(france2)
    france2.add(day1031)
    hotel_stella3 = Booking(hotels[0], Moment("2024-10-31"), planning)
    day1031.add(hotel_stella3)

    day1101 = _day("2024-11-01")
    france2.add(day1101)
    day1101.add(Booking(excursions[1], Moment("2024-11-01"), planning))
    day1101.add(Booking(hotels[0], Moment("2024-11-01"), planning))

    day1102 = _day("2024-11-02")
    france2.add(day1102)
    day1102.add(Booking(excursions[2], Moment("2024-11-02"), planning))
    day1102.add(Booking(hotels[0], Moment("2024-11-02"), planning))

    day1103 = _day("2024-11-03")
    france2.add(day1103)
    day1103.add(Booking(transports[11], Moment("2024-11-03"), planning))

    print()

    # Diego's trip, copied from Dora's with Spain instead of Portugal
    diego = Trip.copy_from("Voyage de Diego", Traveller("Diego"), dora)
    diego.remove("Portugal")

    spain = _segment("Espagne")
    diego.add(spain)

    day1029_diego = _day("2024-10-29")
    spain.add(day1029_diego)
    day1029_diego.add(Booking(transports[12], Moment("2024-10-29"), planning))
    far_home = Booking(hotels[2], Moment("2024-10-29"), planning)
    day1029_diego.add(far_home)

    day1030_diego = _day("2024-10-30")
    spain.add(day1030_diego)
    day1030_diego.add(Booking(excursions[4], Moment("2024-10-30"), planning))
    far_home.moment.date = "2024-10-30"
    day1030_diego.add(far_home)

    day1031_diego = _day("2024-10-31")
    spain.add(day1031_diego)
    day1031_diego.add(Booking(transports[13], Moment("2024-10-31"), planning))

    print()

    alicia = Trip.copy_from("Voyage d'Alicia", Traveller("Alicia"), diego)

    print()

    for trip in (dora, diego, alicia):
        trip.show_total()

    print()
    print("--- Debut de la sortie du TP5")
    print()

    excursions[1].set_strategy(DiscountStrategy(STUDENT_DISCOUNT))
    louvre = CommentedOffer(excursions[1])
    excursions[1] = louvre
    louvre.add_comment(
        Comment(
            "Rabais de 5 dollars canadiens au Louvre pour les étudiants "
            "de Polytechnique Montréal!"
        )
    )

    offers.change_prices(IncreaseStrategy(0.03), "hebergement")
    other_increase = IncreaseStrategy(0.02)
    offers.change_prices(other_increase, "transport")
    offers.change_prices(other_increase, "excursion")

    restaurant = Booking(
        Offer("Restaurant de l'hôtel Stella", 50, "EUR"),
        Moment("27 octobre 2024", "19h"),
        planning,
    )
    hotel1027 = _wrap_or_fail(ModifiedBooking, day1027.reservations, hotel_stella)
    hotel1027.add_modification(restaurant)
    replace_in_trip(diego, hotel1027)
    replace_in_trip(alicia, hotel1027)

    restaurant2 = Booking(
        Offer("Restaurant de l'hôtel Stella", 50, "EUR"),
        Moment("31 octobre 2024", "19h"),
        planning,
    )
    hotel1031 = _wrap_or_fail(ModifiedBooking, day1031.reservations, hotel_stella3)
    hotel1031.add_modification(restaurant2)

    hotel1031_commented = _wrap_or_fail(
        CommentedBooking, day1031.reservations, hotel1031
    )
    replace_in_trip(diego, hotel1031_commented)
    replace_in_trip(alicia, hotel1031_commented)

    hotel1031_commented.add_comment(Comment("Excellent service!"))
    hotel1031.cancel()

    display = get_display()
    for trip, log_name in (
        (dora, "logDora.txt"),
        (diego, "logDiego.txt"),
        (alicia, "logAlicia.txt"),
    ):
        display.filename = str(output_dir / log_name)
        display.show_trip(trip)
        display.export()
        print()

    print()
    print(
        "Total du nombre d'offres de réservations dans la BDOR: "
        f"{offers.count_offers()}."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())