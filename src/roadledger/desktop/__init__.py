"""Flet desktop client for the roadways ledger."""
