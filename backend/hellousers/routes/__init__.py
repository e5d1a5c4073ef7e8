"""
HelloUsers Backend — API Routes Package
========================================

Route Inventory:
    - root.py:   GET  /              (greeting text)
    - users.py:  GET  /users         (fixed Person record)
                 GET  /users/{id}    (user lookup text)
                 POST /users         (echo submitted name)

Routes are thin: they let FastAPI decode the input, call UserService, and
pick the response media type.
"""
