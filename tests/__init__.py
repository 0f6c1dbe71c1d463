# Citei Test Suite
"""
Tests for the Colecao API.

Key principle: Test through the HTTP API, with the repository swapped
for a mock where only the controller is under test.
"""
