"""Sales bounded context: агрегат заказа и сценарии оформления."""
