"""Core orchestration package.

Architectural role:
    Sits between the API/CLI adapters and the transport layers (text, image,
    credentials).

Composition:
    - `engine`: brand and flagship-product pipelines.
    - `session`: presentation state machine held by adapters.
    - `models`: immutable `Brand` / `Product` records.
    - `errors`: user-visible failure taxonomy.

Determinism and side effects:
    Package import itself is side-effect free.
"""
