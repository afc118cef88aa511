"""Timestamp wrapper and the free-function entry points built on it."""

from timewise.timex.timexapi import Timex
from timewise.timex import nowapi

__all__ = [
    "Timex",
    "nowapi",
]
