"""
Cross-validation engines.

IMPORTANT:
- Engines own semantics (update rule, fold partition, error definition).
- Steps only move data between the context and an engine.
- Engines never read config files or touch the filesystem on their own,
  except the report engine when a report path is given.
"""
