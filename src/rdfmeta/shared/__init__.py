"""Shared data models used across rdfmeta components."""
