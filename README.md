# voyageplan

voyageplan builds travel itineraries. A trip is a tree: it holds segments,
segments hold days, and days hold bookings of offers taken from catalogues
of flights, accommodations and excursions. The package totals a trip's cost
in Canadian dollars, applies increase or discount strategies to whole
categories of offers, lets bookings carry modifications and comments, and
writes each trip's itinerary to a log file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demonstration

```
voyageplan
```

The command builds three trips, one each for Dora, Diego and Alicia. Diego's
trip is copied from Dora's with a Spanish segment in place of the Portuguese
one, and Alicia's is copied from Diego's. The command prints their totals,
applies price changes and booking annotations, then appends each itinerary to
`logDora.txt`, `logDiego.txt` and `logAlicia.txt`. It returns 0 on success.

Options:

- `--data-dir DIR`: the directory holding `vol.csv`, `hebergement.csv` and
  `excursion.csv` (default `data`).
- `--output-dir DIR`: the directory the log files are appended to
  (default `.`).

The demonstration indexes into the catalogues, so they must hold enough rows:
at least 14 flights, 3 accommodations and 5 excursions.

## Catalogue format

Each catalogue is a comma-separated file. The first non-empty line is a
header and is skipped; empty lines are ignored. Integer columns are read from
their leading digits.

- **Excursions:** name, city, stars, price, currency
- **Accommodations:** name, city, sector, rating, price, currency
- **Flights:** line name, carrier, number, departure place, arrival place,
  departure date, departure time, arrival date, arrival time, aircraft make,
  class, wifi (`true` or anything else), price, currency

## Prices

An offer's current price is its base price times the factor of its strategy,
truncated to an integer. `IncreaseStrategy(x)` gives a factor of `1 + x`,
`DiscountStrategy(x)` a factor of `1 - x`; offers start with no change.
`OfferDatabase.change_prices` sets a strategy on every offer of a category
and folds the result into the base price.

A booking's price in Canadian dollars is the offer's current price, multiplied
by `Booking.euro_rate` (1.5 by default, changed with `Booking.set_euro_rate`)
when the offer's currency, with non-letters removed, is exactly `EURO`. Any
other currency is taken as Canadian dollars.

## Using the library

```python
from voyageplan.database import (
    OfferDatabase,
    TransportDatabase,
    AccommodationDatabase,
    ExcursionDatabase,
    PlanningDatabase,
)
from voyageplan.models import Moment, Traveller
from voyageplan.pricing import IncreaseStrategy
from voyageplan.reservations import Booking, ReservationGroup
from voyageplan.trip import Trip

offers = OfferDatabase()
offers.add_category("transport", TransportDatabase())
offers.add_category("hebergement", AccommodationDatabase())
offers.add_category("excursion", ExcursionDatabase())
offers.category("hebergement").load("data/hebergement.csv")

planning = PlanningDatabase()
trip = Trip("Voyage de Dora", Traveller("Dora"))

segment = ReservationGroup("France", "segment", True)
day = ReservationGroup("2024-10-27", "journee", False)
trip.add(segment)
segment.add(day)

hotel_offer = offers.category("hebergement").elements[0]
day.add(Booking(hotel_offer, Moment("2024-10-27"), planning))

print(trip.total())

offers.change_prices(IncreaseStrategy(0.03), "hebergement")
print(offers.count_offers())
```

Creating databases, trips and reservation groups, and adding reservations,
prints progress messages to standard output.

Other useful pieces:

- `voyageplan.trip.Trip.copy_from` makes a new trip from a deep copy of
  another trip's reservations; `Trip.remove` drops every reservation with a
  given name.
- `voyageplan.reservations.iter_bookings` yields the bookings under a
  reservation, breadth first.
- `voyageplan.offers.CommentedOffer` is a copy of an offer that carries
  comments.
- `voyageplan.decorators.ModifiedBooking.wrap_in` and
  `voyageplan.decorators.CommentedBooking.wrap_in` replace a booking, where it
  sits in a list of reservations, with a wrapper that adds modifications or
  comments; they return `None` when the booking is not found.
  `voyageplan.decorators.replace_in_trip` puts a booking in place of the one
  with the same name and date in another trip's days.
- `voyageplan.display.get_display()` returns the shared `Display`. Its
  `show_trip` method prints an itinerary and keeps the lines, and `export`
  appends them to the file named by its `filename` attribute, raising
  `ValueError` when no filename is set.

## What it does not do

Bookings are kept in memory only: `PlanningDatabase` collects the bookings
made while the program runs but cannot load or save them, and nothing but the
itinerary logs is written to disk. The command runs a fixed demonstration; it
offers no way to build or edit trips interactively.