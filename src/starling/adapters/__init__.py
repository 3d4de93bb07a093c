"""Adaptadores de I/O: transporte httpx y servicios por recurso."""
