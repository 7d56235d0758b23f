"""Fixture data sets for seeding."""
