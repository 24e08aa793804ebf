"""Services Layer: async orchestration between the pure core and the store.

Invariants:
    - Services never build SQL; persistence goes through core.repository_protocols
    - Every public operation runs inside one store unit of work
"""
