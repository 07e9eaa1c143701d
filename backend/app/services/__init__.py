# Services package init
"""
CustomerDesk Backend — Services Layer
=======================================

Service Inventory:
    - CustomerService: list / get / create / update / delete customer records
"""
