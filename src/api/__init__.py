"""API — camada de borda e adapters de canais.

Responsabilidades:
- Receber requests de canais externos (webhook de interações)
- Validar assinaturas e payloads
- Normalizar dados para modelos internos
- Construir payloads para APIs externas

Subpastas:
- connectors/: adapters HTTP por canal (REST e verificação de assinatura)
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção de mensagens para APIs externas
- routes/: endpoints HTTP por canal (webhooks, health)

NÃO PODE conter: regras de negócio das confissões, orquestração de use cases.
"""
