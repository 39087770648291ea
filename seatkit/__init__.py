"""SeatKit - restaurant reservation management"""

__version__ = "0.1.0"
