"""Flet front end for the biodata form."""
