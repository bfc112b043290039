"""Integration tests for confluence-note-sync.

These tests drive the CLI end to end against real files in a temporary
vault. Only the HTTP session of the Confluence client is mocked.
"""
