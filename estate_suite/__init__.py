"""
Estate Suite
Decision-support engines for Dubai real estate: property matching,
pricing prediction and lead classification.
"""

__version__ = "0.1.0"
