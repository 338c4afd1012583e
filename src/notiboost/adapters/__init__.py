"""Adaptadores de I/O (HTTP) del cliente."""
