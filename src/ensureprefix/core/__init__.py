"""Pure prefix-matching core: no file I/O, no workspace knowledge.

- ``pattern``: compiled prefix patterns and per-file match results.
- ``verifier``: the verification engine and its report types.
"""
