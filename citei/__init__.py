"""Citei - Colecao API."""
