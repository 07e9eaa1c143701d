# Routes package init
"""
CustomerDesk Backend — API Routes Package
===========================================

Route Inventory:
    - customers.py: GET/POST /customer, GET/PUT/DELETE /customer/{id}
    - health.py:    GET /health

Routes stay thin: parse the request, call CustomerService, return the model.
"""
