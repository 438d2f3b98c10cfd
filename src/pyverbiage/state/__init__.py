"""State layer.

This package is the single place that decides whether cached verbiage
terms are valid, whether the remote data is newer, and which keys get
written or cleared.
"""
