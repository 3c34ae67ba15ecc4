"""Services Layer — resource operations between the routes and the repository.

Invariants:
    - Services raise CynovaError subclasses; they never build HTTP responses
    - One service per resource, all sharing ResourceService

Design Decisions:
    - Repository injected through the constructor (routes build it per request)
"""
