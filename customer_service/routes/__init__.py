# Routes package init
"""
Customer Service — API Routes Package
=======================================

Route Inventory:
    - customers.py:  GET    /api/customers                 (list)
                     GET    /api/customers/{id}            (detail)
                     POST   /api/customers                 (create)
                     PUT    /api/customers/{id}            (update)
                     DELETE /api/customers/{id}            (delete)
                     POST   /api/customers/with-photo      (create with photo)
                     POST   /api/customers/{id}/photo      (upload photo)
    - health.py:     GET    /health                        (service health check)

Routes stay thin: extract request data, call the service, pick the status code.
"""
