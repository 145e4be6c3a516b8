"""Connectors - adapters de borda para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (cliente HTTP, schema do update, webhook)
"""

__all__: list[str] = []
