"""Row storage layer.

This module holds the storage contract, range clamping, and the
in-memory reference backend used by table views.
"""
