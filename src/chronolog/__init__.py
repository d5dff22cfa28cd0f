"""Chronolog - a same-day-every-year personal journal."""
