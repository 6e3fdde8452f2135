"""API: camada de borda HTTP para a camada de view.

Responsabilidades:
- Receber deep links e comandos de navegação/sessão
- Validar payloads (pydantic)
- Delegar para o App Coordinator mantido em app.state

NÃO PODE conter: regras de navegação, FSM ou parsing de deep links.
"""
