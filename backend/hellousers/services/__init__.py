"""
HelloUsers Backend — Services Layer
====================================

What:  Produces the payloads the routes return.
Why:   Routes handle HTTP (status codes, media types); services hold the values.

Service Inventory:
    - UserService: greeting text, the fixed Person record, and the
      templated user-lookup and submission replies
"""
