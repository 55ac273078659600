"""CRM bounded context."""

from src.crm.customer import Customer

__all__ = ["Customer"]
