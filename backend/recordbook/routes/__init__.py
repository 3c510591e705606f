# Routes package init
"""
RecordBook Backend — API Routes Package
=========================================

Route Inventory:
    - records.py: the six record operations, built once per collection
                  (financial-history, associated-files, associated-history)
    - health.py:  GET /health

Routes are THIN: they resolve dependencies, call RecordService and wrap
the result in the envelope. Errors propagate to the handlers in main.py.
"""
