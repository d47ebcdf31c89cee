"""App: orquestração, casos de uso e infraestrutura da importação.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: saga de importação por URL
- domain/: modelos e erros tipados da importação
- services/: política de mídia e tasks em background
- infra/: implementações concretas de IO (Redis, GCS, HTTP, NIP-98)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
