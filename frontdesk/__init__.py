"""Front-desk application for the clinic backend.

This package holds the in-memory patient, doctor and appointment tables,
the services operating on them, and the API views and routes exposing
them over HTTP.
"""
