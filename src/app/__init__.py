"""App — composição e contratos do conector.

Subpastas:
- bootstrap/: composition root (logging, settings, cliente, webhook)
- protocols/: contratos/interfaces consumidos pelas funções de recurso
- observability/: correlation_id para logs estruturados

Padrão: app compõe; api adapta; config parametriza.
"""
