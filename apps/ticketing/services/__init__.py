"""Ticket printing services."""
