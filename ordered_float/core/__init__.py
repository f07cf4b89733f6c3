"""
Core value types, mathematical primitives, and contracts.

Everything here is pure and stateless: no I/O beyond loading the bundled
JSON Schema files, no shared mutable state.
"""
