"""App - núcleo do sistema: consulta de números, persistência e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo inbound -> pipeline -> outbound
- use_cases/: casos de uso (consulta e processamento de update)
- services/: normalizador, classificador e formatador de respostas
- domain/: Contact, LineType e resultado da classificação
- infra/: stores concretos (SQLAlchemy, memória)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas
- constants/: textos de resposta e contatos iniciais

Padrão: app executa; api adapta; config configura; utils apoia.
"""
