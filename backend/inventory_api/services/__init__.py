"""Services: async inventory operations over an injected AsyncSession.

Invariants:
    - Every function receives its session; none opens its own
    - Missing rows raise ResourceNotFoundError; routes never inspect driver errors
"""
