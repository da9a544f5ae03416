"""Output helpers for the numeral-systems CLI."""
