"""App: núcleo de coordenação de navegação.

Subpastas:
- bootstrap/: composition root (logging, settings, wiring)
- coordinators/: coordinators de feature e App Coordinator
- services/: colaboradores em memória (auth, tasks em background)
- protocols/: contratos/interfaces
- sessions/: monitor de inatividade de sessão
- observability/: correlation_id e métricas via logs

Padrão: routing descreve; fsm governa; app executa; api adapta; utils apoia.
"""
