"""Contratos (Protocol) de los clientes de recursos."""
