"""Payout tables and configuration."""
