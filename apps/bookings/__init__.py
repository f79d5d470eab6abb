"""Bookings app package.

This app encapsulates the booking domain: the booking model, the pure
availability engine and the services that check availability and write
inside one transaction while the spot row is locked.
"""
