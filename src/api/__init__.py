"""API: camada de borda HTTP.

Responsabilidades:
- Receber requests HTTP e extrair body/headers
- Propagar correlation_id
- Converter resultados e erros do caso de uso em respostas JSON

Subpastas:
- routes/: endpoints HTTP (importação, health)

NÃO PODE conter: validação de mídia, persistência, orquestração da saga.
"""
