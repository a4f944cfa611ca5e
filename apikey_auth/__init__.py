"""
API key extraction from ApiKey-scheme Authorization headers.
"""
