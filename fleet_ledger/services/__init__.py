"""Pricing and ledger services."""
