"""Spots app package.

This app encapsulates spot listings and their images: the listing query
with range filters and pagination, the read-side aggregation of average
rating and preview image, and the owner-only mutations.
"""
