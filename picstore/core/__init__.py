"""
Shared, cross-cutting code for picstore.

`core/` holds the small building blocks that every feature uses
(connection lifecycle, settings, errors, public id encoding). Keep
entity-specific SQL and business rules in the feature package
(e.g. `images/`, `users/`).
"""
