"""Starlette front end for the recetario domain."""
