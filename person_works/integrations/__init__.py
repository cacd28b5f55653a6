"""
External system integrations (TMDb).

Remote metadata clients live under this namespace so the credit-shaping code in
`person_works.works` only depends on a `get(path, params)` capability.
"""
