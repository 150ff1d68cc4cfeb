"""Schemas — Pydantic models for employees and the response envelope."""
