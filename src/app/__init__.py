"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (dispatch de interações)
- services/: serviços de aplicação (fluxo de confissões)
- infra/: implementações concretas de IO (stores)
- protocols/: contratos/interfaces
- domain/: modelos de interação, mensagem e confissão
- observability/: correlation_id e métricas via logs estruturados
- constants/: constantes da Discord API

Padrão: app executa; api adapta; utils apoia. app só conhece api via bootstrap.
"""
