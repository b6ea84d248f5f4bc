"""
Hello Server — API Routes Package
===================================

Route Inventory:
    - hello.py:    GET  /hello/{name}     (path extraction)
                   GET  /count            (shared counter)
    - records.py:  POST /record/create    (JSON in, JSON out)
                   POST /try              (fallible JSON endpoint)
    - query.py:    GET  /query            (query-string extraction)
    - health.py:   GET  /health           (liveness)

Static files are mounted by create_app(), not by a router.
"""
