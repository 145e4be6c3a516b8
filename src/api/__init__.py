"""API - camada de borda do canal Telegram.

Responsabilidades:
- Receber o webhook e autenticar o token do path
- Validar o update contra o schema tipado
- Normalizar o update para modelos internos
- Construir payloads e chamar a Bot API

Subpastas:
- connectors/: cliente HTTP, schema do update, autenticação do webhook
- normalizers/: update -> InboundTextMessage
- payload_builders/: payload de sendMessage
- routes/: endpoints HTTP (webhook, health, ready)

NÃO PODE conter: regras de numeração, acesso ao banco, formatação de respostas.
"""
