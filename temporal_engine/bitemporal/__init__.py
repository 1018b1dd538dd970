"""Bitemporal records - valid/transaction time, record store, and queries."""

from .schemas import BitemporalRecord, BitemporalTime
from .service import BitemporalDatabase
from .query import TemporalQuery

__all__ = [
    "BitemporalDatabase",
    "BitemporalRecord",
    "BitemporalTime",
    "TemporalQuery",
]
