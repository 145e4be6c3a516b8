"""Normalizers - payloads externos para modelos internos."""
