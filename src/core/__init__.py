"""
Core: общие value-объекты, ошибки домена, конфигурация и контракты.

Модули этого пакета не зависят от bounded context'ов (sales, crm)
и не выполняют логирование.
"""
