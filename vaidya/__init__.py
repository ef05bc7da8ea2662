"""Vaidya clinic scheduling service."""
