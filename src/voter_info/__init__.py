"""Voter information records, voterinfo feed import, and map popup layout."""
