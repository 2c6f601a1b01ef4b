"""Pydantic schemas for records and reports."""
