"""API — camada de borda com a Stripe.

Responsabilidades:
- Chamar a API REST (form-encoded, Bearer auth, Stripe-Account)
- Decodificar respostas e envelopes de erro em modelos tipados
- Verificar assinaturas de webhook antes de parsear eventos

Subpastas:
- connectors/: adapters HTTP por provedor

NÃO PODE conter: regras de negócio, retry, persistência.
"""
