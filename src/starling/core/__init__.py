"""Core del SDK: dominio, validación, configuración y contratos."""
