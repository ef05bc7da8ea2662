"""
Scheduling Domain

Slot generation, slot booking and patient records.
"""
