"""Trip planning with offer catalogues, pricing strategies and annotated bookings."""

__version__ = "0.1.0"