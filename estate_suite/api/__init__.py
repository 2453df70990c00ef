"""
Estate Suite HTTP API
"""
