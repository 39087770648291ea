"""Database models"""

from seatkit.models.reservation import Reservation

__all__ = [
    "Reservation",
]
