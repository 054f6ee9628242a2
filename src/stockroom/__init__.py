"""Stockroom — single-resource product inventory service."""
