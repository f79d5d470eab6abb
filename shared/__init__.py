"""
Shared Kernel

Base classes, plain data records and the entity store port shared by the
spots, bookings and reviews apps.
"""
