"""Shared test data for the Algorand SDK tests."""
