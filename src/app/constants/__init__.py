"""Constantes da aplicação (textos de resposta e dados iniciais)."""
