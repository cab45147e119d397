"""
Components layer.

Record contracts (see `contracts.py`), the validators run before every
mutation (`validation.py`) and the field projector used by read endpoints
(`field_projection.py`).
"""
