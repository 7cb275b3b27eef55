"""Table view layer.

This module holds column configuration, cell edit codecs, sort state,
and the view-model facade consumed by rendering code.
"""
