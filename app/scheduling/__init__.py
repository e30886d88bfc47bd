"""
Availability engine.

Pure, synchronous building blocks used by the booking services:
- Interval arithmetic on "HH:MM" times (intervals.py)
- Weekly schedule model and parsing (schedule.py)
- Slot generation at a fixed cadence (slots.py)
- Schedule containment checks (availability.py)
- Staff block / booking conflict detection (overlap.py)
"""
