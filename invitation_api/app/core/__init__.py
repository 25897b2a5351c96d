"""
Core infrastructure: settings, logging, the MongoDB store adapter and
the exception hierarchy shared by every layer.
"""
