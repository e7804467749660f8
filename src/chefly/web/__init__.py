"""Chefly Web API."""
